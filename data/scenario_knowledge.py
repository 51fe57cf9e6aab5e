"""Hand-authored eating advice for the places users typically buy food."""

SCENARIO_KNOWLEDGE = {
    "convenience_store": {
        "recommended": [
            "Ready-to-eat chicken breast strips",
            "Tea eggs",
            "Unsweetened soy milk",
            "Skim milk",
            "Egg sandwich",
            "Oden (radish, konjac)",
            "Vegetable salad",
            "Plain unsweetened yogurt",
        ],
        "tips": [
            "Check the nutrition label on the package",
            "Pair a protein item with fruit instead of a pastry",
        ],
        "avoid": ["Fried chicken", "Hot dogs", "Instant noodles", "Sweet buns"],
    },
    "canteen": {
        "recommended": [
            "Stir-fried greens",
            "Tomato and egg stir-fry",
            "Steamed fish",
            "Seaweed and egg soup",
            "Smashed cucumber salad",
        ],
        "tips": [
            "Skip braised and deep-fried dishes",
            "Pick mixed-grain rice or corn as the staple",
            "Ask for less oil",
            "Choose clear soups",
        ],
        "avoid": ["Red-braised pork belly", "Fried chicken cutlet", "Spicy dry pot", "Heavy oil and salt dishes"],
    },
    "takeout": {
        "recommended": [
            "Light salad bowls",
            "Japanese sashimi or sushi",
            "Vietnamese rice noodle soup",
            "Grilled chicken burger",
        ],
        "tips": [
            "Choose steamed or boiled over fried",
            "Add a note asking for less oil and salt",
            "Halve the staple or swap in whole grains",
        ],
        "avoid": ["Fried chicken delivery", "Chongqing spicy noodles", "Malatang with full oil", "Milk tea and desserts"],
    },
}
