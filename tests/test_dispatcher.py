import threading

from kinarai.core.errors import UpstreamTimeout
from kinarai.models.response_models import Food, Restaurant
from kinarai.services.dispatcher import merge_restaurants, run_recommendation_branches


class StubService:
    def __init__(self, restaurants=None, foods=None):
        self.restaurants = restaurants
        self.foods = foods
        self.calls = []

    def _answer(self, value):
        if isinstance(value, Exception):
            raise value
        if callable(value):
            return value()
        return value

    def get_restaurant_recommendations(self, location):
        self.calls.append(("restaurants", location))
        return self._answer(self.restaurants)

    def get_food_recommendations(self, food_type):
        self.calls.append(("foods", food_type))
        return self._answer(self.foods)


REST = [Restaurant(id="rest-1", name="Jay Fai")]
FOOD = [Food(id="food-1", name="Pad Thai")]


def test_single_branch_leaves_other_key_absent():
    response = run_recommendation_branches(StubService(restaurants=REST), location="Bangkok")
    assert response.to_json() == {"restaurants": [{"id": "rest-1", "name": "Jay Fai"}]}


def test_both_branches():
    service = StubService(restaurants=REST, foods=FOOD)
    response = run_recommendation_branches(service, location="Bangkok", food_type="Thai")
    assert response.restaurants == REST
    assert response.foods == FOOD
    assert response.error is None


def test_timeout_in_one_branch_keeps_the_other():
    service = StubService(restaurants=UpstreamTimeout("slow"), foods=FOOD)
    response = run_recommendation_branches(service, location="Bangkok", food_type="Thai")
    assert response.restaurants is None
    assert response.foods == FOOD
    assert response.error == "Restaurant recommendations timed out"


def test_branch_deadline():
    release = threading.Event()

    def slow():
        release.wait(5)
        return FOOD

    service = StubService(restaurants=REST, foods=slow)
    try:
        response = run_recommendation_branches(service, location="Bangkok", food_type="Thai", timeout=0.1)
    finally:
        release.set()

    assert response.restaurants == REST
    assert response.foods is None
    assert response.error == "Food recommendations timed out"


def test_unexpected_error_is_reported_per_branch():
    service = StubService(restaurants=ValueError("bad"), foods=FOOD)
    response = run_recommendation_branches(service, location="Bangkok", food_type="Thai")
    assert response.error == "Failed to get restaurant recommendations"
    assert response.foods == FOOD


def test_redirected_food_branch_lands_in_restaurants():
    service = StubService(foods=REST)
    response = run_recommendation_branches(service, food_type="ร้านอาหารอิตาเลียน")
    assert response.restaurants == REST
    assert response.foods is None


def test_no_fields_no_calls():
    service = StubService()
    assert run_recommendation_branches(service).to_json() == {}
    assert service.calls == []


def _numbered(n, prefix="Bangkok"):
    return [Restaurant(id=f"rest-{i}", name=f"{prefix} {i}") for i in range(1, n + 1)]


def test_location_and_redirected_food_keep_ids_unique():
    location_results = _numbered(15)
    redirected = _numbered(15, prefix="Italian")
    service = StubService(restaurants=location_results, foods=redirected)

    response = run_recommendation_branches(service, location="Bangkok", food_type="ร้านอาหารอิตาเลียน")

    ids = [r.id for r in response.restaurants]
    assert len(ids) == 30
    assert len(set(ids)) == 30
    assert response.restaurants[:15] == location_results
    assert ids[15:] == [f"rest-{i}" for i in range(16, 31)]
    assert [r.name for r in response.restaurants[15:]] == [f"Italian {i}" for i in range(1, 16)]
    assert response.foods is None


def test_merge_skips_ids_still_to_come():
    existing = [Restaurant(id="rest-1", name="A")]
    extra = [Restaurant(id="rest-1", name="B"), Restaurant(id="rest-2", name="C")]

    merged = merge_restaurants(existing, extra)

    assert [r.id for r in merged] == ["rest-1", "rest-3", "rest-2"]
    assert extra[0].id == "rest-1"
