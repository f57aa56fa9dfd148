"""Superfood categories and the ingredient aliases that identify them."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SuperfoodCategory:
    """Superfood category with display metadata."""

    id: str
    name: str
    description: str
    aliases: tuple[str, ...]


SUPERFOODS: tuple[SuperfoodCategory, ...] = (
    SuperfoodCategory(
        id="beans",
        name="Beans & Legumes",
        description="Black beans, chickpeas, lentils, etc.",
        aliases=(
            "beans",
            "black beans",
            "kidney beans",
            "pinto beans",
            "navy beans",
            "chickpeas",
            "garbanzo beans",
            "lentils",
            "lentil",
            "black-eyed peas",
            "cannellini beans",
            "white beans",
        ),
    ),
    SuperfoodCategory(
        id="oliveOil",
        name="Olive Oil",
        description="Extra virgin olive oil and healthy fats",
        aliases=("olive oil", "extra virgin olive oil", "evoo", "virgin olive oil"),
    ),
    SuperfoodCategory(
        id="fermented",
        name="Fermented Foods",
        description="Kimchi, yogurt, sauerkraut, miso, etc.",
        aliases=(
            "kimchi",
            "sauerkraut",
            "yogurt",
            "greek yogurt",
            "kefir",
            "miso",
            "tempeh",
            "kombucha",
            "fermented",
        ),
    ),
    SuperfoodCategory(
        id="ginger",
        name="Ginger",
        description="Fresh or ground ginger",
        aliases=("ginger", "fresh ginger", "ginger root", "ground ginger"),
    ),
    SuperfoodCategory(
        id="turmeric",
        name="Turmeric",
        description="Turmeric and curcumin",
        aliases=("turmeric", "curcumin"),
    ),
    SuperfoodCategory(
        id="cod",
        name="Cod",
        description="Cod fish (Omega-3 rich)",
        aliases=("cod", "cod fish", "cod fillet"),
    ),
    SuperfoodCategory(
        id="sardines",
        name="Sardines",
        description="Sardines (Omega-3 rich)",
        aliases=("sardines", "sardine", "canned sardines"),
    ),
    SuperfoodCategory(
        id="salmon",
        name="Salmon",
        description="Salmon (Omega-3 rich)",
        aliases=(
            "salmon",
            "salmon fillet",
            "wild salmon",
            "atlantic salmon",
            "pacific salmon",
        ),
    ),
    SuperfoodCategory(
        id="mackerel",
        name="Mackerel",
        description="Mackerel (Omega-3 rich)",
        aliases=("mackerel", "mackerel fillet"),
    ),
    SuperfoodCategory(
        id="herring",
        name="Herring",
        description="Herring (Omega-3 rich)",
        aliases=("herring", "herring fillet"),
    ),
    SuperfoodCategory(
        id="blueberries",
        name="Blueberries",
        description="Blueberries and other berries",
        aliases=("blueberries", "blueberry", "wild blueberries"),
    ),
    SuperfoodCategory(
        id="strawberries",
        name="Strawberries",
        description="Strawberries",
        aliases=("strawberries", "strawberry"),
    ),
    SuperfoodCategory(
        id="raspberries",
        name="Raspberries",
        description="Raspberries",
        aliases=("raspberries", "raspberry"),
    ),
    SuperfoodCategory(
        id="blackberries",
        name="Blackberries",
        description="Blackberries",
        aliases=("blackberries", "blackberry"),
    ),
    SuperfoodCategory(
        id="spinach",
        name="Spinach",
        description="Spinach and leafy greens",
        aliases=("spinach", "baby spinach", "fresh spinach"),
    ),
    SuperfoodCategory(
        id="kale",
        name="Kale",
        description="Kale",
        aliases=("kale", "curly kale", "lacinato kale"),
    ),
    SuperfoodCategory(
        id="arugula",
        name="Arugula",
        description="Arugula/rocket",
        aliases=("arugula", "rocket"),
    ),
    SuperfoodCategory(
        id="almonds",
        name="Almonds",
        description="Almonds and almond products",
        aliases=("almonds", "almond", "sliced almonds", "almond butter"),
    ),
    SuperfoodCategory(
        id="walnuts",
        name="Walnuts",
        description="Walnuts",
        aliases=("walnuts", "walnut", "walnut pieces"),
    ),
    SuperfoodCategory(
        id="chiaSeeds",
        name="Chia Seeds",
        description="Chia seeds",
        aliases=("chia seeds", "chia seed", "chia"),
    ),
    SuperfoodCategory(
        id="flaxSeeds",
        name="Flax Seeds",
        description="Flax seeds",
        aliases=("flax seeds", "flaxseed", "ground flaxseed", "flax"),
    ),
    SuperfoodCategory(
        id="quinoa",
        name="Quinoa",
        description="Quinoa",
        aliases=("quinoa", "quinoa grain"),
    ),
    SuperfoodCategory(
        id="oats",
        name="Oats",
        description="Oats and oatmeal",
        aliases=("oats", "rolled oats", "steel-cut oats", "oatmeal"),
    ),
    SuperfoodCategory(
        id="brownRice",
        name="Brown Rice",
        description="Brown rice",
        aliases=("brown rice", "whole grain rice"),
    ),
    SuperfoodCategory(
        id="avocado",
        name="Avocado",
        description="Avocado and avocado oil",
        aliases=("avocado", "avocados", "avocado oil"),
    ),
    SuperfoodCategory(
        id="sweetPotato",
        name="Sweet Potato",
        description="Sweet potatoes/yams",
        aliases=("sweet potato", "sweet potatoes", "yam"),
    ),
    SuperfoodCategory(
        id="broccoli",
        name="Broccoli",
        description="Broccoli",
        aliases=("broccoli", "broccoli florets", "broccoli crown"),
    ),
    SuperfoodCategory(
        id="garlic",
        name="Garlic",
        description="Garlic",
        aliases=("garlic", "garlic cloves", "minced garlic", "garlic powder"),
    ),
)
