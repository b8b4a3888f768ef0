"""Fixed catalog served by the mock backend."""

_APPETIZERS: list[dict[str, object]] = [
    {
        "id": 1,
        "name": "Asian Flank Steak",
        "description": "This perfectly thin cut just melts in your mouth.",
        "price": 8.99,
        "image": "asian-flank-steak.jpg",
        "calories": 300,
        "protein": 14,
        "carbs": 0,
    },
    {
        "id": 2,
        "name": "Buffalo Chicken Bites",
        "description": "Buffalicious bites of chicken & joy.",
        "price": 5.99,
        "image": "buffalo-chicken-bites.jpg",
        "calories": 280,
        "protein": 12,
        "carbs": 8,
    },
    {
        "id": 3,
        "name": "Chicken Avocado Spring Roll",
        "description": "These won't last 10 minutes once they hit the table.",
        "price": 6.99,
        "image": "chicken-avocado-spring-roll.jpg",
        "calories": 270,
        "protein": 18,
        "carbs": 15,
    },
    {
        "id": 4,
        "name": "Chicken Tenders",
        "description": (
            "Our bettered and fried chicken tenders are a customer favorite."
        ),
        "price": 8.99,
        "image": "chicken-tenders.jpg",
        "calories": 450,
        "protein": 32,
        "carbs": 12,
    },
    {
        "id": 5,
        "name": "Fried Pickles",
        "description": "Who doesn't love a good pickle? Fried pickle to be exact.",
        "price": 4.99,
        "image": "fried-pickles.jpg",
        "calories": 290,
        "protein": 6,
        "carbs": 25,
    },
    {
        "id": 6,
        "name": "Philly Cheesesteak Sliders",
        "description": (
            "Philly's finest on a mini bun. It will have you coming back for more."
        ),
        "price": 9.99,
        "image": "philly-cheesesteak-sliders.jpg",
        "calories": 520,
        "protein": 28,
        "carbs": 35,
    },
    {
        "id": 7,
        "name": "Rainbow Spring Roll",
        "description": "It's like eating a rainbow! So many flavors in one bite.",
        "price": 7.99,
        "image": "rainbow-spring-roll.jpg",
        "calories": 200,
        "protein": 8,
        "carbs": 20,
    },
    {
        "id": 8,
        "name": "Spinach Dip",
        "description": "Warm cheese and spinach dip served with fresh tortilla chips.",
        "price": 5.99,
        "image": "spinach-dip.jpg",
        "calories": 350,
        "protein": 12,
        "carbs": 18,
    },
    {
        "id": 9,
        "name": "Texas Cheese Fries",
        "description": (
            "Lone Star's spin on loaded cheese fries with shredded brisket."
        ),
        "price": 8.99,
        "image": "texas-cheese-fries.jpg",
        "calories": 450,
        "protein": 22,
        "carbs": 28,
    },
]

IMAGE_PATH_PREFIX = "/images/appetizers"


def image_files() -> set[str]:
    """Return the image file names referenced by the catalog."""
    return {str(entry["image"]) for entry in _APPETIZERS}


def catalog_payload(server_url: str) -> list[dict[str, object]]:
    """Return catalog entries in wire format with absolute image URLs."""
    base = server_url.rstrip("/")
    return [
        {
            "id": entry["id"],
            "name": entry["name"],
            "description": entry["description"],
            "price": entry["price"],
            "imageURL": f"{base}{IMAGE_PATH_PREFIX}/{entry['image']}",
            "calories": entry["calories"],
            "protein": entry["protein"],
            "carbs": entry["carbs"],
        }
        for entry in _APPETIZERS
    ]
