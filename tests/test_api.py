"""Tests for the HTTP API."""

import base64

from fastapi.testclient import TestClient

from render_studio.api.app import create_app
from render_studio.catalogs import DESIGN_STYLES, VIEWS
from render_studio.containers import AppContainer
from tests.conftest import PNG_HEADER, FakeGenerationClient, make_image

MODERN = DESIGN_STYLES[0].fragment
FRONT = VIEWS[0].fragment


def _upload_payload() -> dict[str, str]:
    encoded = base64.b64encode(PNG_HEADER + b"photo").decode("utf-8")
    return {
        "data": f"data:image/png;base64,{encoded}",
        "mime_type": "image/png",
        "name": "house.png",
    }


def _new_session(client: TestClient) -> str:
    response = client.post("/sessions")
    assert response.status_code == 201
    return response.json()["id"]


def test_health(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    assert client.get("/health").json() == {"status": "ok"}


def test_index_page_is_served(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/")

    assert response.status_code == 200
    assert "Render Studio" in response.text
    assert 'id="style-lock"' in response.text
    assert "call('DELETE', base() + '/style-lock')" in response.text


def test_options_lists_every_axis(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    data = client.get("/options").json()

    assert set(data) == {
        "style",
        "building_type",
        "context",
        "lighting",
        "weather_or_time",
        "view",
    }
    assert data["style"][0] == {"label": "Modern", "fragment": MODERN}


def test_selection_patch_rederives_prompt(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    session_id = _new_session(client)

    client.put(f"/sessions/{session_id}/prompt", json={"prompt": "manual"})
    response = client.patch(
        f"/sessions/{session_id}/selection", json={"style": "Modern", "view": FRONT}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["prompt"] == f"{MODERN}, {FRONT}"
    assert data["selection"]["style"] == MODERN


def test_unknown_option_is_rejected(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    session_id = _new_session(client)

    response = client.patch(
        f"/sessions/{session_id}/selection", json={"style": "Baroque"}
    )

    assert response.status_code == 422


def test_render_without_image_returns_422(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    session_id = _new_session(client)

    response = client.post(f"/sessions/{session_id}/render")

    assert response.status_code == 422
    assert response.json() == {"detail": "Please upload an image."}


def test_unknown_session_returns_404(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/sessions/00000000-0000-0000-0000-000000000000")

    assert response.status_code == 404


def test_invalid_base64_upload_is_rejected(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    session_id = _new_session(client)

    response = client.put(
        f"/sessions/{session_id}/image",
        json={"data": "not base64!", "mime_type": "image/png"},
    )

    assert response.status_code == 422


def test_render_save_lock_and_download_flow(
    container: AppContainer, generation_client: FakeGenerationClient
) -> None:
    client = TestClient(create_app(container))
    session_id = _new_session(client)

    upload = client.put(f"/sessions/{session_id}/image", json=_upload_payload())
    assert upload.json()["image_name"] == "house.png"
    client.patch(f"/sessions/{session_id}/selection", json={"style": "Modern"})

    render = client.post(f"/sessions/{session_id}/render")
    assert render.status_code == 200
    record = render.json()
    assert generation_client.calls == ["derive_sketch", "synthesize"]

    final = client.get(record["final_url"])
    assert final.content == generation_client.final.data

    saved = client.post(f"/sessions/{session_id}/gallery/{record['id']}")
    assert saved.json() == {"saved": True}
    again = client.post(f"/sessions/{session_id}/gallery/{record['id']}")
    assert again.json() == {"saved": False}

    locked = client.post(f"/sessions/{session_id}/style-lock/{record['id']}")
    assert locked.json()["style_lock"]["id"] == record["id"]

    download = client.get(record["download_url"])
    assert download.status_code == 200
    disposition = download.headers["content-disposition"]
    assert disposition.startswith('attachment; filename="Modern_Custom_Custom_Custom')

    unlocked = client.delete(f"/sessions/{session_id}/style-lock")
    assert unlocked.json()["style_lock"] is None


def test_style_lock_stays_visible_and_unlockable_after_next_render(
    container: AppContainer,
) -> None:
    client = TestClient(create_app(container))
    session_id = _new_session(client)
    client.put(f"/sessions/{session_id}/image", json=_upload_payload())
    first = client.post(f"/sessions/{session_id}/render").json()
    client.post(f"/sessions/{session_id}/style-lock/{first['id']}")

    second = client.post(f"/sessions/{session_id}/render").json()
    state = client.get(f"/sessions/{session_id}").json()

    assert state["current"]["id"] == second["id"]
    assert state["style_lock"]["id"] == first["id"]
    assert state["style_lock"]["final_url"].endswith("/images/final")

    unlocked = client.delete(f"/sessions/{session_id}/style-lock")
    assert unlocked.json()["style_lock"] is None


def test_download_uses_image_mime_type_and_can_export_sketch(
    container: AppContainer, generation_client: FakeGenerationClient
) -> None:
    generation_client.final = make_image("final", mime_type="image/jpeg")
    client = TestClient(create_app(container))
    session_id = _new_session(client)
    client.put(f"/sessions/{session_id}/image", json=_upload_payload())
    record = client.post(f"/sessions/{session_id}/render").json()

    final = client.get(record["download_url"])
    assert final.headers["content-type"] == "image/jpeg"
    assert final.content == generation_client.final.data

    sketch = client.get(record["download_url"], params={"kind": "sketch"})
    assert sketch.status_code == 200
    assert sketch.headers["content-type"] == "image/png"
    assert sketch.content == generation_client.sketch.data
    assert sketch.headers["content-disposition"].startswith("attachment;")


def test_render_failure_returns_generic_message(
    container: AppContainer, generation_client: FakeGenerationClient
) -> None:
    client = TestClient(create_app(container))
    session_id = _new_session(client)
    client.put(f"/sessions/{session_id}/image", json=_upload_payload())
    generation_client.fail_on.add("derive_sketch")

    response = client.post(f"/sessions/{session_id}/render")

    assert response.status_code == 502
    assert response.json() == {"detail": "An error occurred during rendering."}
    state = client.get(f"/sessions/{session_id}").json()
    assert state["is_rendering"] is False
    assert state["current"] is None


def test_suggest_prompt_failure_returns_502(
    container: AppContainer, generation_client: FakeGenerationClient
) -> None:
    client = TestClient(create_app(container))
    session_id = _new_session(client)
    generation_client.fail_on.add("describe_prompt")

    response = client.post(f"/sessions/{session_id}/prompt/suggest")

    assert response.status_code == 502
    assert response.json() == {"detail": "Could not generate prompt automatically."}


def test_gallery_delete_flow(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    session_id = _new_session(client)
    client.put(f"/sessions/{session_id}/image", json=_upload_payload())
    record = client.post(f"/sessions/{session_id}/render").json()
    client.post(f"/sessions/{session_id}/gallery/{record['id']}")

    pending = client.delete(f"/sessions/{session_id}/gallery/{record['id']}")
    assert pending.json()["status"] == "confirmation_required"
    assert len(client.get(f"/sessions/{session_id}/gallery").json()["records"]) == 1

    confirmed = client.post(f"/sessions/{session_id}/gallery/delete/confirm")
    assert confirmed.json() == {"deleted": True}
    assert client.get(f"/sessions/{session_id}/gallery").json()["records"] == []


def test_progress_is_idle_after_render(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    session_id = _new_session(client)

    response = client.get(f"/sessions/{session_id}/progress")

    assert response.json() == {"is_rendering": False, "progress": ""}
