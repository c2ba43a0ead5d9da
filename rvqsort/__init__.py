"""Fixed integer dataset for a quicksort benchmark and its sorted reference."""

__version__ = "0.1.0"
__all__ = ["input_data", "verify_data"]