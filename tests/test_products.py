# tests/test_products.py
import pytest

from sdk import TestDataFactory


def _names(resp):
    return [p["name"] for p in resp.json()]


def test_list_all_products(client):
    r = client.get("/api/products")
    assert r.status_code == 200
    assert _names(r) == ["Laptop", "Coffee Mug", "Running Shoes"]
    assert r.json()[0] == {"id": 1, "name": "Laptop", "price": 999.99,
                           "category": "Electronics", "inStock": True}


def test_filter_by_category_is_case_insensitive(client):
    r = client.get("/api/products", params={"category": "electronics"})
    assert _names(r) == ["Laptop"]
    assert _names(client.get("/api/products", params={"category": "KITCHEN"})) == ["Coffee Mug"]


def test_category_and_query_compose(client):
    assert _names(client.get("/api/products", params={"category": "o", "q": "shoe"})) == ["Running Shoes"]
    assert _names(client.get("/api/products", params={"category": "sports", "q": "laptop"})) == []


@pytest.mark.parametrize("category", [None, "e", "Sports", "zzz"])
@pytest.mark.parametrize("q", [None, "o", "MUG", "zzz"])
def test_listing_is_filtered_catalog(client, category, q):
    catalog = client.get("/api/products").json()
    expected = [p for p in catalog
                if (not category or category.lower() in p["category"].lower())
                and (not q or q.lower() in p["name"].lower())]
    params = {k: v for k, v in {"category": category, "q": q}.items() if v}
    assert client.get("/api/products", params=params).json() == expected


def test_search_terms(client):
    expected = {
        "laptop": ["Laptop"],
        "coffee": ["Coffee Mug"],
        "shoes": ["Running Shoes"],
        "electronics": [],
        "nonexistent-product-xyz": [],
    }
    for term in TestDataFactory.get_search_terms():
        r = client.get("/api/products/search", params={"q": term})
        assert r.status_code == 200
        assert _names(r) == expected[term]


def test_search_without_query_returns_catalog(client):
    assert len(client.get("/api/products/search").json()) == 3


def test_get_product(client):
    r = client.get("/api/products/2")
    assert r.status_code == 200
    assert r.json()["name"] == "Coffee Mug"


@pytest.mark.parametrize("pid", ["999", "abc"])
def test_get_missing_product(client, pid):
    r = client.get(f"/api/products/{pid}")
    assert r.status_code == 404
    assert r.json() == {"error": "Product not found"}


@pytest.mark.parametrize("pid", ["1abc", "1.5", "1_0", " 1", "+1"])
def test_get_product_reads_leading_integer(client, pid):
    r = client.get(f"/api/products/{pid}")
    assert r.status_code == 200
    assert r.json()["name"] == "Laptop"
