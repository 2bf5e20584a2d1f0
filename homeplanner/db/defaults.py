from __future__ import annotations

# (name, order) for categories every new account starts with.
DEFAULT_CATEGORIES: list[tuple[str, int]] = [
    ("Living Room", 1),
    ("Kitchen", 2),
    ("Bedroom", 3),
    ("Bathroom", 4),
    ("Office", 5),
    ("Outdoor", 6),
    ("Electronics", 7),
    ("Decor", 8),
    ("Storage", 9),
    ("Other", 10),
]

# (name, category name) shared autocomplete entries.
DEFAULT_SUGGESTIONS: list[tuple[str, str]] = [
    ("Sofa", "Living Room"),
    ("Coffee Table", "Living Room"),
    ("TV Stand", "Living Room"),
    ("Bookshelf", "Living Room"),
    ("Area Rug", "Living Room"),
    ("Floor Lamp", "Living Room"),
    ("Curtains", "Living Room"),
    ("Throw Pillows", "Living Room"),
    ("Refrigerator", "Kitchen"),
    ("Microwave", "Kitchen"),
    ("Toaster", "Kitchen"),
    ("Coffee Maker", "Kitchen"),
    ("Blender", "Kitchen"),
    ("Pots and Pans Set", "Kitchen"),
    ("Knife Set", "Kitchen"),
    ("Cutting Board", "Kitchen"),
    ("Dish Set", "Kitchen"),
    ("Utensil Set", "Kitchen"),
    ("Trash Can", "Kitchen"),
    ("Paper Towel Holder", "Kitchen"),
    ("Bed Frame", "Bedroom"),
    ("Mattress", "Bedroom"),
    ("Pillows", "Bedroom"),
    ("Bedding Set", "Bedroom"),
    ("Dresser", "Bedroom"),
    ("Nightstand", "Bedroom"),
    ("Wardrobe", "Bedroom"),
    ("Bedside Lamp", "Bedroom"),
    ("Alarm Clock", "Bedroom"),
    ("Shower Curtain", "Bathroom"),
    ("Bath Towels", "Bathroom"),
    ("Bath Mat", "Bathroom"),
    ("Toilet Brush", "Bathroom"),
    ("Soap Dispenser", "Bathroom"),
    ("Toothbrush Holder", "Bathroom"),
    ("Bathroom Mirror", "Bathroom"),
    ("Laundry Hamper", "Bathroom"),
    ("Desk", "Office"),
    ("Office Chair", "Office"),
    ("Monitor", "Office"),
    ("Desk Lamp", "Office"),
    ("Filing Cabinet", "Office"),
    ("Printer", "Office"),
    ("Desk Organizer", "Office"),
    ("TV", "Electronics"),
    ("Speakers", "Electronics"),
    ("Router", "Electronics"),
    ("Power Strip", "Electronics"),
    ("Smart Home Hub", "Electronics"),
    ("Vacuum Cleaner", "Electronics"),
    ("Air Purifier", "Electronics"),
    ("Fan", "Electronics"),
    ("Wall Art", "Decor"),
    ("Picture Frames", "Decor"),
    ("Vases", "Decor"),
    ("Candles", "Decor"),
    ("Plants", "Decor"),
    ("Decorative Mirror", "Decor"),
    ("Wall Clock", "Decor"),
    ("Storage Bins", "Storage"),
    ("Closet Organizer", "Storage"),
    ("Shoe Rack", "Storage"),
    ("Hangers", "Storage"),
    ("Drawer Dividers", "Storage"),
    ("Vacuum Storage Bags", "Storage"),
    ("Doormat", "Outdoor"),
    ("Patio Furniture", "Outdoor"),
    ("Grill", "Outdoor"),
    ("Garden Hose", "Outdoor"),
    ("Outdoor Lighting", "Outdoor"),
    ("Planters", "Outdoor"),
    ("First Aid Kit", "Other"),
    ("Tool Kit", "Other"),
    ("Fire Extinguisher", "Other"),
    ("Batteries", "Other"),
    ("Light Bulbs", "Other"),
    ("Extension Cord", "Other"),
]
