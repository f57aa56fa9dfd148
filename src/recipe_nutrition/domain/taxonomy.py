"""Keyword tables mapping nutrient categories to ingredient-name substrings.

All tables are read-only and shared by every analyzer. Keywords are matched
as lower-case substrings of ingredient text, and the same food may appear in
several categories.
"""

from types import MappingProxyType

VITAMIN_C_SOURCES = (
    "citrus",
    "orange",
    "lemon",
    "lime",
    "grapefruit",
    "kiwi",
    "strawberry",
    "bell pepper",
    "broccoli",
    "tomato",
    "spinach",
    "kale",
)

VITAMIN_A_SOURCES = (
    "carrot",
    "sweet potato",
    "pumpkin",
    "spinach",
    "kale",
    "milk",
    "cheese",
    "egg",
    "butter",
)

B_VITAMIN_SOURCES = (
    "whole grain",
    "brown rice",
    "quinoa",
    "chicken",
    "beef",
    "pork",
    "fish",
    "bean",
    "lentil",
    "milk",
    "yogurt",
)

VITAMIN_B12_SOURCES = ("meat", "fish", "chicken", "egg", "milk")

CALCIUM_SOURCES = (
    "milk",
    "cheese",
    "yogurt",
    "spinach",
    "kale",
    "broccoli",
    "tofu",
    "almond",
)

IRON_SOURCES = (
    "beef",
    "chicken",
    "pork",
    "fish",
    "bean",
    "lentil",
    "spinach",
    "fortified",
)

POTASSIUM_SOURCES = (
    "banana",
    "potato",
    "sweet potato",
    "spinach",
    "tomato",
    "bean",
    "yogurt",
    "avocado",
)

MAGNESIUM_SOURCES = (
    "almond",
    "walnut",
    "cashew",
    "pumpkin seed",
    "quinoa",
    "spinach",
    "black bean",
)

ZINC_SOURCES = (
    "beef",
    "chicken",
    "oyster",
    "crab",
    "almond",
    "pumpkin seed",
    "lentil",
)

PHOSPHORUS_SOURCES = (
    "chicken",
    "beef",
    "fish",
    "milk",
    "yogurt",
    "almond",
    "lentil",
)

FATTY_FISH_SOURCES = (
    "salmon",
    "mackerel",
    "sardine",
    "tuna",
    "herring",
    "anchovy",
    "trout",
)

PLANT_OMEGA3_SOURCES = (
    "walnut",
    "flaxseed",
    "chia seed",
    "hemp seed",
    "canola oil",
    "soybean",
)

# ORAC units per 100 g.
ORAC_PER_100G: MappingProxyType[str, int] = MappingProxyType(
    {
        "blueberry": 4669,
        "strawberry": 4302,
        "raspberry": 5065,
        "blackberry": 5905,
        "cranberry": 9090,
        "acai": 102700,
        "goji berry": 25300,
        "dark chocolate": 20816,
        "pecan": 17940,
        "artichoke": 9400,
        "kidney bean": 8606,
        "black bean": 8494,
        "prune": 5770,
        "plum": 6259,
        "apple": 3049,
        "red wine": 3607,
        "green tea": 1253,
        "spinach": 1513,
        "broccoli": 1513,
        "kale": 1770,
        "cinnamon": 131420,
        "oregano": 200129,
        "turmeric": 159277,
        "ginger": 28811,
        "garlic": 5708,
        "onion": 1034,
        "tomato": 387,
        "carrot": 697,
    }
)

POLYPHENOL_SOURCES = ("berry", "grape", "wine", "tea", "chocolate")

CAROTENOID_SOURCES = (
    "carrot",
    "tomato",
    "sweet potato",
    "pumpkin",
    "paprika",
    "red pepper",
)

ANTIOXIDANT_VITAMIN_C_SOURCES = (
    "citrus",
    "berry",
    "pepper",
    "broccoli",
    "kale",
    "spinach",
)

ANTIOXIDANT_VITAMIN_E_SOURCES = (
    "almond",
    "walnut",
    "sunflower seed",
    "avocado",
    "spinach",
)


def contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    """Return True when any keyword is a substring of the text."""
    return any(keyword in text for keyword in keywords)


def count_matching(texts: list[str], keywords: tuple[str, ...]) -> int:
    """Count texts that contain at least one keyword."""
    return sum(1 for text in texts if contains_any(text, keywords))
