"""ShopEase storefront API: catalog, checkout and admin product management."""

__version__ = "0.1.0"
