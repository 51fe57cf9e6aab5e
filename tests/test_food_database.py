"""Tests for the reference food catalogue in `services/food_database.py`."""
import random

from services.food_database import FoodDatabase, food_database


def test_catalogue_loads_all_rows():
    assert len(food_database) == 22
    food = food_database.get_food_by_id("chicken_breast")
    assert food.name == "Chicken Breast"
    assert food.per_100g.protein == 23
    assert food_database.get_food_by_id("unicorn_steak") is None


def test_search_matches_name_alias_and_tag():
    assert [f.id for f in food_database.search_foods("yoghurt")] == ["greek_yogurt"]
    assert [f.id for f in food_database.search_foods("TOFU")] == ["braised_tofu"]
    assert [f.id for f in food_database.search_foods("mantou")] == ["steamed_bun"]
    canteen = food_database.search_foods("canteen")
    assert len(canteen) == 7
    assert all("canteen" in f.tags for f in canteen)


def test_search_blank_query_returns_nothing():
    assert food_database.search_foods("") == []
    assert food_database.search_foods("   ") == []


def test_foods_by_tag_exact():
    ids = [f.id for f in food_database.get_foods_by_tag("takeout")]
    assert ids == ["chicken_salad", "beef_noodles", "fried_rice"]


def test_calculate_nutrition_scales_per_100g():
    chicken = food_database.get_food_by_id("chicken_breast")
    n = food_database.calculate_nutrition(chicken, 200)
    assert n.calories == 220
    assert n.protein == 46.0
    assert n.carbs == 0.0
    assert n.fat == 3.0

    potato = food_database.get_food_by_id("sweet_potato")
    n = food_database.calculate_nutrition(potato, 150)
    assert n.calories == 135
    assert n.carbs == 31.5
    assert n.fat == 0.3


def test_scenario_pool_falls_back_to_whole_catalogue():
    assert len(food_database.scenario_pool("canteen")) == 7
    assert len(food_database.scenario_pool("moon_base")) == len(food_database)
    assert len(food_database.scenario_pool(None)) == len(food_database)


def test_suggested_foods_deterministic_with_seeded_rng():
    first = food_database.get_suggested_foods("convenience_store", count=3, rng=random.Random(7))
    second = food_database.get_suggested_foods("convenience_store", count=3, rng=random.Random(7))
    assert [f.id for f in first] == [f.id for f in second]
    assert len(first) == 3
    assert all("convenience_store" in f.tags for f in first)


def test_suggested_foods_count_larger_than_pool():
    foods = food_database.get_suggested_foods("takeout", count=10, rng=random.Random(1))
    assert sorted(f.id for f in foods) == ["beef_noodles", "chicken_salad", "fried_rice"]


def test_suggestions_do_not_reorder_catalogue():
    food_database.get_suggested_foods(None, count=5, rng=random.Random(3))
    assert food_database.list_foods()[0].id == "chicken_breast"


def test_estimate_portion_uses_standard_serving():
    est = food_database.estimate_portion(food_database.get_food_by_id("chicken_breast"))
    assert est.weight_g == 200
    assert est.calories == 220
    assert est.protein == 46.0
    assert est.confidence == 0.6
    assert est.tips == "meat - high_protein, low_fat, convenience_store, muscle_gain"


def test_fallback_recognition_for_scenario():
    names = {f.name for f in food_database.get_foods_by_tag("canteen")}
    results = food_database.fallback_recognition("canteen", count=2, rng=random.Random(5))
    assert len(results) == 2
    assert all(r.name in names for r in results)
    assert all(r.confidence == 0.6 for r in results)


def test_custom_rows():
    db = FoodDatabase(rows=[{
        "id": "rice_cake", "name": "Rice Cake", "category": "snack", "serving_size_g": 10,
        "per_100g": {"calories": 387, "protein": 8, "carbs": 81, "fat": 2.8},
    }])
    assert len(db) == 1
    assert db.get_food_by_id("rice_cake").tags == []
    assert db.calculate_nutrition(db.get_food_by_id("rice_cake"), 10).calories == 39


def test_find_foods_combines_query_and_tag():
    assert [f.id for f in food_database.find_foods("chicken", "takeout")] == ["chicken_salad"]
    assert [f.id for f in food_database.find_foods(tag="takeout")] == ["chicken_salad", "beef_noodles", "fried_rice"]
    assert len(food_database.find_foods()) == len(food_database)
    assert food_database.find_foods("chicken", "no_such_tag") == []
