"""Fixed product dataset served by the catalog provider."""

PRODUCTS = [
    {
        "id": "1",
        "slug": "wireless-headphones",
        "name": "Wireless Headphones",
        "description": "Over-ear headphones with active noise cancellation and 30-hour battery life.",
        "price": "129.99",
        "images": [
            "/images/products/headphones-1.jpg",
            "/images/products/headphones-2.jpg",
        ],
        "category": "Electronics",
        "in_stock": True,
        "featured": True,
        "attributes": {"color": "Black", "connectivity": "Bluetooth 5.2", "battery": "30h"},
    },
    {
        "id": "2",
        "slug": "smart-watch",
        "name": "Smart Watch",
        "description": "Fitness tracking, heart-rate monitoring and notifications on your wrist.",
        "price": "199.99",
        "images": ["/images/products/watch-1.jpg", "/images/products/watch-2.jpg"],
        "category": "Electronics",
        "in_stock": True,
        "featured": True,
        "attributes": {"color": "Silver", "water_resistance": "5 ATM"},
    },
    {
        "id": "3",
        "slug": "leather-backpack",
        "name": "Leather Backpack",
        "description": "Full-grain leather backpack with a padded 15-inch laptop sleeve.",
        "price": "89.99",
        "images": ["/images/products/backpack-1.jpg"],
        "category": "Accessories",
        "in_stock": True,
        "featured": False,
        "attributes": {"material": "Leather", "capacity": "20L"},
    },
    {
        "id": "4",
        "slug": "ceramic-coffee-mug",
        "name": "Ceramic Coffee Mug",
        "description": "Hand-glazed stoneware mug, dishwasher and microwave safe.",
        "price": "24.99",
        "images": ["/images/products/mug-1.jpg"],
        "category": "Home",
        "in_stock": True,
        "featured": False,
        "attributes": {"capacity": "350ml"},
    },
    {
        "id": "5",
        "slug": "desk-lamp",
        "name": "LED Desk Lamp",
        "description": "Dimmable desk lamp with adjustable color temperature and USB charging port.",
        "price": "39.99",
        "images": ["/images/products/lamp-1.jpg", "/images/products/lamp-2.jpg"],
        "category": "Home",
        "in_stock": True,
        "featured": True,
    },
    {
        "id": "6",
        "slug": "canvas-sneakers",
        "name": "Canvas Sneakers",
        "description": "Classic low-top sneakers with a vulcanized rubber sole.",
        "price": "59.99",
        "images": ["/images/products/sneakers-1.jpg"],
        "category": "Fashion",
        "in_stock": False,
        "featured": False,
        "attributes": {"sizes": "36-46"},
    },
]
