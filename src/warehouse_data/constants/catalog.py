"""
Product catalog reference data.

Inventory items cycle through these lists by index, so item N always
gets PRODUCT_NAMES[N % 40], CATEGORIES[N % 8], and so on.
"""

CATEGORIES = [
    "Electronics",
    "Clothing",
    "Home & Garden",
    "Sports",
    "Books",
    "Automotive",
    "Health & Beauty",
    "Tools",
]

PRODUCT_NAMES = [
    # Electronics
    "Wireless Headphones",
    "Smart Watch",
    "Laptop Charger",
    "USB Cable",
    "Phone Case",
    # Clothing
    "T-Shirt",
    "Jeans",
    "Sneakers",
    "Jacket",
    "Hat",
    # Home & Garden
    "Garden Hose",
    "Plant Pot",
    "LED Bulb",
    "Cushion",
    "Candle",
    # Sports
    "Basketball",
    "Yoga Mat",
    "Dumbbells",
    "Tennis Racket",
    "Water Bottle",
    # Books
    "Programming Book",
    "Novel",
    "Cookbook",
    "Magazine",
    "Journal",
    # Automotive
    "Car Filter",
    "Motor Oil",
    "Brake Pads",
    "Windshield Wipers",
    "Floor Mats",
    # Health & Beauty
    "Shampoo",
    "Face Cream",
    "Toothbrush",
    "Vitamins",
    "Soap",
    # Tools
    "Screwdriver Set",
    "Hammer",
    "Drill Bits",
    "Wrench Set",
    "Measuring Tape",
]

SUPPLIERS = [
    "Global Supply Co.",
    "Premium Parts Ltd.",
    "Quick Logistics",
    "Reliable Wholesale",
    "Express Import",
]

# Aisle-bay codes
LOCATIONS = [
    "A1-01",
    "A1-02",
    "A2-01",
    "A2-02",
    "B1-01",
    "B1-02",
    "B2-01",
    "B2-02",
    "C1-01",
    "C1-02",
]

REGIONS = ["North", "South", "East", "West", "Central"]

UNITS = ["pcs", "kg"]
