import pytest


def test_generate_maze_seeded(client):
    r = client.post("/api/maze/generate", json={"size": 4, "seed": 77})
    assert r.status_code == 200
    data = r.get_json()
    assert data["size"] == 4 and data["seed"] == 77
    assert len(data["grid"]) == 4 and all(len(row) == 4 for row in data["grid"])
    cell = data["grid"][0][0]
    assert set(cell["walls"]) == {"top", "right", "bottom", "left"}
    again = client.post("/api/maze/generate", json={"size": 4, "seed": 77}).get_json()
    assert again["grid"] == data["grid"]


def test_generate_maze_defaults(client, test_app):
    r = client.post("/api/maze/generate", json={})
    assert r.status_code == 200
    data = r.get_json()
    assert data["size"] == test_app.config["MAZE_DEFAULT_SIZE"]
    assert isinstance(data["seed"], int)


@pytest.mark.parametrize("payload", [{"size": 0}, {"size": 10_000}, {"size": "big"}])
def test_generate_maze_rejects_bad_size(client, payload):
    r = client.post("/api/maze/generate", json=payload)
    assert r.status_code == 400
    assert "error" in r.get_json()


def test_non_object_body_rejected(client):
    r = client.post("/api/maze/generate", json=[1, 2, 3])
    assert r.status_code == 400


def test_find_path_endpoint(client):
    r = client.post("/api/maze/path", json={"size": 6, "seed": 5, "start": [0, 0], "goal": [5, 5]})
    assert r.status_code == 200
    data = r.get_json()
    assert data["found"] is True
    assert data["path"][-1] == [5, 5]
    assert [0, 0] not in data["path"]


def test_find_path_same_cell(client):
    data = client.post("/api/maze/path", json={"size": 3, "seed": 1, "start": [1, 1], "goal": [1, 1]}).get_json()
    assert data == {"found": True, "path": []}


def test_find_path_budget_exhausted(client):
    r = client.post(
        "/api/maze/path",
        json={"size": 12, "seed": 3, "start": [0, 0], "goal": [11, 11], "max_steps": 1},
    )
    assert r.status_code == 200
    assert r.get_json() == {"found": False, "path": None}


@pytest.mark.parametrize(
    "payload",
    [
        {"size": 5, "start": [0, 0], "goal": [1, 1]},
        {"size": 5, "seed": 1, "start": [0, 0], "goal": [9, 9]},
        {"size": 5, "seed": 1, "start": "0,0", "goal": [1, 1]},
        {"size": 5, "seed": 1, "goal": [1, 1]},
    ],
)
def test_find_path_rejects_bad_input(client, test_app, payload):
    test_app.config["MAZE_SEED"] = None
    r = client.post("/api/maze/path", json=payload)
    assert r.status_code == 400


def test_damage_endpoint(client):
    r = client.post("/api/combat/damage", json={"base": 100, "modifiers": {"criticalHit": True}})
    assert r.get_json() == {"damage": 150}
    r = client.post("/api/combat/damage", json={"base": 100, "modifiers": {"blocking": True, "damageReduction": 0.2}})
    assert r.get_json() == {"damage": 40}


def test_damage_endpoint_requires_base(client):
    r = client.post("/api/combat/damage", json={"modifiers": {}})
    assert r.status_code == 400


def test_heal_endpoint(client):
    r = client.post("/api/combat/heal", json={"base": 30, "modifiers": {"currentHp": 60}})
    assert r.get_json() == {"healing": 30}
    r = client.post("/api/combat/heal", json={"base": 30, "modifiers": {"currentHp": 95}})
    assert r.get_json() == {"healing": 5}


def test_visibility_endpoint(client, test_app):
    r = client.post("/api/visibility/radius", json={"visibility": {"baseRadius": 3}, "items": {"torch": True}})
    assert r.get_json() == {"radius": 4}
    r = client.post("/api/visibility/radius", json={})
    assert r.get_json() == {"radius": max(1, test_app.config["VISIBILITY_BASE_RADIUS"])}


def test_objectives_endpoint(client):
    profile = {"objectives": [{"id": "gems", "count": 3}, {"id": "exit"}]}
    r = client.post("/api/objectives/init", json={"profile": profile})
    assert r.get_json() == {
        "progress": {
            "gems": {"target": 3, "current": 0, "completed": False},
            "exit": {"target": 1, "current": 0, "completed": False},
        }
    }
    assert client.post("/api/objectives/init", json={}).get_json() == {"progress": {}}
    assert client.post("/api/objectives/init", json={"profile": "nope"}).status_code == 400


def test_fire_hook_endpoint(client):
    profile = {"onDamage": "/say ouch {{amount}} from {{source}}"}
    r = client.post("/api/hooks/fire", json={"profile": profile, "hook": "onDamage", "params": {"amount": 7, "source": "trap"}})
    assert r.status_code == 200
    assert r.get_json() == {"executed": True, "command": "/say ouch 7 from trap"}


def test_fire_hook_endpoint_failures(client):
    r = client.post("/api/hooks/fire", json={"profile": {}, "hook": "onMove"})
    assert r.get_json() == {"executed": False, "error": "Hook not defined or empty"}
    r = client.post("/api/hooks/fire", json={"hook": "onMove"})
    assert r.get_json() == {"executed": False, "error": "No profile provided"}


@pytest.mark.parametrize(
    "payload",
    [
        {"profile": {}},
        {"profile": [], "hook": "onMove"},
        {"profile": {}, "hook": 5},
        {"profile": {}, "hook": "onMove", "params": [1]},
    ],
)
def test_fire_hook_endpoint_bad_request(client, payload):
    assert client.post("/api/hooks/fire", json=payload).status_code == 400


def test_fire_hook_endpoint_seeded(client):
    body = {"profile": {"onLoot": "/give gold {{random:1:500}}"}, "hook": "onLoot", "seed": 9}
    a = client.post("/api/hooks/fire", json=body).get_json()
    b = client.post("/api/hooks/fire", json=body).get_json()
    assert a == b and a["executed"] is True


def test_hook_catalog_endpoint(client):
    r = client.get("/api/hooks/catalog")
    assert r.status_code == 200
    data = r.get_json()
    assert data["onMove"] == ["x", "y", "direction"]
    assert "onObjectiveComplete" in data


def test_damage_endpoint_overflow_is_bad_request(client):
    r = client.post("/api/combat/damage", json={"base": 1e308, "modifiers": {"damageMult": 10}})
    assert r.status_code == 400
    assert "finite" in r.get_json()["error"]


@pytest.mark.parametrize(
    "endpoint,payload,field",
    [
        ("/api/combat/damage", {"base": 10, "modifiers": [1]}, "modifiers"),
        ("/api/combat/heal", {"base": 10, "modifiers": "lots"}, "modifiers"),
        ("/api/visibility/radius", {"items": ["torch"]}, "items"),
        ("/api/visibility/radius", {"visibility": 3}, "visibility"),
    ],
)
def test_non_object_fields_rejected(client, endpoint, payload, field):
    r = client.post(endpoint, json=payload)
    assert r.status_code == 400
    assert r.get_json() == {"error": f"{field} must be an object"}
