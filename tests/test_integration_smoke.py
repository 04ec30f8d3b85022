import pytest

from locatecar import create_app

from seeds import seed


@pytest.fixture()
def app(tmp_path):
    return create_app({
        "TESTING": True,
        "DATA_DIR": str(tmp_path / "data"),
        "REPORTS_DIR": "",
    })


def test_home(app):
    with app.test_client() as c:
        r = c.get("/")
        assert r.status_code == 200
        assert r.get_json()["service"] == "locatecar"
        assert c.get("/health").get_json() == {"status": "ok"}


def test_seed_persists_and_is_idempotent(app, tmp_path):
    store = app.extensions["locatecar"].store
    assert seed(store) == 9
    assert seed(store) == 0
    assert (tmp_path / "data" / "customers.pkl").exists()

    reloaded = create_app({"TESTING": True, "DATA_DIR": str(tmp_path / "data"), "REPORTS_DIR": ""})
    with reloaded.test_client() as c:
        assert c.get("/").get_json()["vehicles"] == 3
        assert c.get("/customers/stats").get_json()["total"] == 6
