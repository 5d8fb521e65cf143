from .executor import CliRuntimeExecutor, RuntimeExecutor

__all__ = ["CliRuntimeExecutor", "RuntimeExecutor"]
