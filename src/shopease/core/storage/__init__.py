from .seed import SAMPLE_PRODUCTS
from .storage import MemStorage, Storage

__all__ = ["MemStorage", "SAMPLE_PRODUCTS", "Storage"]
