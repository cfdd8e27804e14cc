"""Errors raised by block type implementations."""


class BlockError(RuntimeError):
    """Base class for block type errors."""


class InputParseError(BlockError, ValueError):
    """Raised when a creation payload cannot be decoded."""


class MethodNotFoundError(BlockError):
    """Raised when a block type has no method with the requested name."""

    def __init__(self, method_name: str, block_type: str):
        super().__init__(f"No method named '{method_name}' exists on block type '{block_type}'.")
        self.method_name = method_name
        self.block_type = block_type


__all__ = ["BlockError", "InputParseError", "MethodNotFoundError"]
