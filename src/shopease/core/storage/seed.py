"""Sample catalog loaded into every fresh store."""

from src.shopease.entities.service.product import InsertProduct

_IMAGE = "https://images.unsplash.com/{}?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&h=250"

SAMPLE_PRODUCTS: tuple[InsertProduct, ...] = (
    InsertProduct(
        name="Premium Wireless Headphones",
        price="299.99",
        image=_IMAGE.format("photo-1505740420928-5e560c06d30e"),
        description=(
            "High-quality wireless headphones with noise cancellation and premium "
            "sound quality. Experience crystal-clear audio with up to 30 hours of "
            "battery life."
        ),
    ),
    InsertProduct(
        name="Latest Smartphone",
        price="799.99",
        image=_IMAGE.format("photo-1511707171634-5f897ff02aa9"),
        description=(
            "Latest smartphone with advanced camera, fast processor, and "
            "long-lasting battery. Features 5G connectivity and stunning display."
        ),
    ),
    InsertProduct(
        name="Professional Laptop",
        price="1299.99",
        image=_IMAGE.format("photo-1496181133206-80ce9b88a853"),
        description=(
            "High-performance laptop perfect for work, gaming, and creative tasks. "
            "Powerful processor and stunning graphics."
        ),
    ),
    InsertProduct(
        name="Smart Fitness Watch",
        price="399.99",
        image=_IMAGE.format("photo-1523275335684-37898b6baf30"),
        description=(
            "Advanced fitness tracking, heart rate monitoring, and smart "
            "notifications. Track your health and stay connected."
        ),
    ),
    InsertProduct(
        name="Portable Bluetooth Speaker",
        price="149.99",
        image=_IMAGE.format("photo-1608043152269-423dbba4e7e1"),
        description=(
            "Waterproof portable speaker with 360-degree sound and long battery "
            "life. Perfect for outdoor adventures."
        ),
    ),
)
