FOODS_DATA = [
    # Convenience store - protein
    {"id": "chicken_breast", "name": "Chicken Breast", "category": "meat", "serving_size_g": 200, "per_100g": {"calories": 110, "protein": 23, "carbs": 0, "fat": 1.5}, "tags": ["high_protein", "low_fat", "convenience_store", "muscle_gain"], "aliases": ["chicken", "chicken strips"]},
    {"id": "boiled_egg", "name": "Boiled Egg", "category": "eggs", "serving_size_g": 50, "per_100g": {"calories": 155, "protein": 13, "carbs": 1.1, "fat": 11}, "tags": ["high_protein", "convenience_store", "breakfast"], "aliases": ["egg", "hard boiled egg"]},
    {"id": "tea_egg", "name": "Tea Egg", "category": "eggs", "serving_size_g": 50, "per_100g": {"calories": 144, "protein": 13, "carbs": 1.5, "fat": 10}, "tags": ["high_protein", "convenience_store"], "aliases": ["marbled egg", "braised egg"]},
    {"id": "milk", "name": "Whole Milk", "category": "dairy", "serving_size_g": 250, "per_100g": {"calories": 54, "protein": 3.4, "carbs": 5, "fat": 3.2}, "tags": ["convenience_store", "breakfast", "protein"], "aliases": ["milk", "fresh milk"]},
    {"id": "greek_yogurt", "name": "Greek Yogurt", "category": "dairy", "serving_size_g": 150, "per_100g": {"calories": 97, "protein": 10, "carbs": 3.6, "fat": 5}, "tags": ["high_protein", "convenience_store", "low_carb"], "aliases": ["yogurt", "yoghurt"]},
    # Convenience store - staples
    {"id": "whole_wheat_bread", "name": "Whole Wheat Bread", "category": "staple", "serving_size_g": 100, "per_100g": {"calories": 247, "protein": 13, "carbs": 41, "fat": 3.4}, "tags": ["convenience_store", "staple", "whole_grain"], "aliases": ["bread", "toast"]},
    {"id": "sweet_potato", "name": "Roasted Sweet Potato", "category": "staple", "serving_size_g": 200, "per_100g": {"calories": 90, "protein": 2, "carbs": 21, "fat": 0.2}, "tags": ["convenience_store", "staple", "low_fat", "whole_grain"], "aliases": ["sweet potato", "yam"]},
    {"id": "corn", "name": "Corn on the Cob", "category": "staple", "serving_size_g": 200, "per_100g": {"calories": 96, "protein": 3.4, "carbs": 21, "fat": 1.5}, "tags": ["convenience_store", "staple", "whole_grain"], "aliases": ["sweet corn", "corn"]},
    {"id": "instant_oats", "name": "Instant Oats", "category": "staple", "serving_size_g": 40, "per_100g": {"calories": 367, "protein": 13, "carbs": 67, "fat": 6.9}, "tags": ["convenience_store", "staple", "whole_grain", "breakfast"], "aliases": ["oats", "oatmeal"]},
    # Canteen - staples
    {"id": "white_rice", "name": "Steamed White Rice", "category": "staple", "serving_size_g": 200, "per_100g": {"calories": 130, "protein": 2.6, "carbs": 28, "fat": 0.3}, "tags": ["canteen", "staple"], "aliases": ["rice", "white rice"]},
    {"id": "brown_rice", "name": "Brown Rice", "category": "staple", "serving_size_g": 200, "per_100g": {"calories": 111, "protein": 2.6, "carbs": 23, "fat": 0.9}, "tags": ["canteen", "staple", "whole_grain"], "aliases": ["brown rice"]},
    {"id": "steamed_bun", "name": "Steamed Bun", "category": "staple", "serving_size_g": 100, "per_100g": {"calories": 221, "protein": 7, "carbs": 47, "fat": 1.1}, "tags": ["canteen", "staple"], "aliases": ["mantou", "plain bun"]},
    # Canteen - dishes
    {"id": "stir_fry_veg", "name": "Stir-fried Greens", "category": "vegetable", "serving_size_g": 150, "per_100g": {"calories": 60, "protein": 2, "carbs": 8, "fat": 2}, "tags": ["canteen", "low_calorie", "vegetable"], "aliases": ["greens", "stir fry"]},
    {"id": "braised_tofu", "name": "Braised Tofu", "category": "soy", "serving_size_g": 150, "per_100g": {"calories": 120, "protein": 8, "carbs": 4, "fat": 8}, "tags": ["canteen", "protein", "vegetarian"], "aliases": ["tofu"]},
    {"id": "steamed_fish", "name": "Steamed Fish", "category": "seafood", "serving_size_g": 150, "per_100g": {"calories": 100, "protein": 20, "carbs": 0, "fat": 2}, "tags": ["canteen", "high_protein", "low_fat"], "aliases": ["fish", "steamed sea bass"]},
    {"id": "chicken_drumstick", "name": "Chicken Drumstick", "category": "meat", "serving_size_g": 150, "per_100g": {"calories": 181, "protein": 18, "carbs": 0, "fat": 12}, "tags": ["canteen", "high_protein"], "aliases": ["drumstick", "roast chicken leg"]},
    # Takeout
    {"id": "chicken_salad", "name": "Chicken Breast Salad", "category": "light_meal", "serving_size_g": 300, "per_100g": {"calories": 85, "protein": 12, "carbs": 5, "fat": 2.5}, "tags": ["takeout", "fat_loss", "high_protein", "low_calorie"], "aliases": ["salad", "poke bowl"]},
    {"id": "beef_noodles", "name": "Beef Noodle Soup", "category": "noodles", "serving_size_g": 500, "per_100g": {"calories": 120, "protein": 8, "carbs": 18, "fat": 2}, "tags": ["takeout", "staple"], "aliases": ["noodles", "ramen"]},
    {"id": "fried_rice", "name": "Egg Fried Rice", "category": "rice", "serving_size_g": 350, "per_100g": {"calories": 180, "protein": 5, "carbs": 28, "fat": 5}, "tags": ["takeout", "staple"], "aliases": ["fried rice"]},
    # Snacks
    {"id": "banana", "name": "Banana", "category": "fruit", "serving_size_g": 100, "per_100g": {"calories": 89, "protein": 1.1, "carbs": 23, "fat": 0.3}, "tags": ["convenience_store", "fruit", "sport"], "aliases": ["plantain"]},
    {"id": "apple", "name": "Apple", "category": "fruit", "serving_size_g": 200, "per_100g": {"calories": 52, "protein": 0.3, "carbs": 14, "fat": 0.2}, "tags": ["convenience_store", "fruit", "low_calorie"], "aliases": []},
    {"id": "protein_bar", "name": "Protein Bar", "category": "supplement", "serving_size_g": 60, "per_100g": {"calories": 380, "protein": 30, "carbs": 40, "fat": 10}, "tags": ["convenience_store", "high_protein", "sport", "muscle_gain"], "aliases": ["energy bar"]},
]
