from datetime import timedelta
from uuid import uuid4

PREFIX = "/api/v1"

WORD = {"word": "huis", "language_code": "nl", "meaning": "house"}


def add_card(client, card_id=None):
    payload = {"word": WORD}
    if card_id is not None:
        payload["id"] = str(card_id)
    return client.post(f"{PREFIX}/cards", json=payload)


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_boxes_of_fresh_store(client):
    response = client.get(f"{PREFIX}/boxes")

    assert response.status_code == 200
    boxes = response.json()["boxes"]
    assert [box["review_interval"] for box in boxes] == [1, 3, 7, 14, 30]
    assert [box["index"] for box in boxes] == [0, 1, 2, 3, 4]
    assert all(box["cards"] == [] for box in boxes)


def test_add_card_places_it_in_first_box(client, fixed_uuid):
    response = add_card(client, fixed_uuid)

    assert response.status_code == 201
    body = response.json()
    assert body["box_index"] == 0
    assert body["card"]["id"] == str(fixed_uuid)
    assert body["card"]["word"]["meaning"] == "house"

    boxes = client.get(f"{PREFIX}/boxes").json()["boxes"]
    assert [len(box["cards"]) for box in boxes] == [1, 0, 0, 0, 0]


def test_add_card_generates_id_when_missing(client):
    body = add_card(client).json()

    assert body["card"]["id"]


def test_duplicate_card_is_a_conflict(client, fixed_uuid):
    add_card(client, fixed_uuid)

    response = add_card(client, fixed_uuid)

    assert response.status_code == 409
    assert response.json()["type"] == "DuplicateCardError"


def test_review_moves_card_and_persists(client, fixed_uuid):
    add_card(client, fixed_uuid)

    response = client.post(f"{PREFIX}/cards/{fixed_uuid}/review", json={"correct": True})

    assert response.status_code == 200
    assert response.json()["box_index"] == 1

    response = client.post(f"{PREFIX}/cards/{fixed_uuid}/review", json={"correct": False})
    assert response.json()["box_index"] == 0

    boxes = client.get(f"{PREFIX}/boxes").json()["boxes"]
    assert [len(box["cards"]) for box in boxes] == [1, 0, 0, 0, 0]


def test_review_unknown_card_is_not_found(client):
    response = client.post(f"{PREFIX}/cards/{uuid4()}/review", json={"correct": True})

    assert response.status_code == 404
    assert response.json()["type"] == "CardNotFoundError"


def test_review_requires_outcome(client, fixed_uuid):
    add_card(client, fixed_uuid)

    response = client.post(f"{PREFIX}/cards/{fixed_uuid}/review", json={})

    assert response.status_code == 422


def test_due_cards_follow_the_clock(client, clock):
    for _ in range(3):
        add_card(client)

    assert client.get(f"{PREFIX}/review/due").json() == {"cards": [], "count": 0}

    clock.advance(timedelta(days=1))
    body = client.get(f"{PREFIX}/review/due", params={"limit": 2}).json()

    assert body["count"] == 2
    assert len(body["cards"]) == 2


def test_due_limit_must_not_be_negative(client):
    assert client.get(f"{PREFIX}/review/due", params={"limit": -1}).status_code == 422
