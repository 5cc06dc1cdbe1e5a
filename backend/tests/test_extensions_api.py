"""
Testes para os endpoints /api/extensions
"""
from sqlalchemy import text

from app.models import ExtensionType, FileExtension
from app.utils.extension_names import FIXED_EXTENSIONS, MAX_CUSTOM_EXTENSIONS

API = "/api/extensions"


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get(f"{API}/health").json() == {"status": "ok"}


def test_index_page_served(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "custom-list" in response.text
    assert client.get("/js/app.js").status_code == 200


def test_list_fixed(client):
    response = client.get(f"{API}/fixed")

    assert response.status_code == 200
    data = response.json()
    assert [item["extName"] for item in data] == list(FIXED_EXTENSIONS)
    assert set(data[0]) == {"extId", "extName", "isBlocked"}
    assert all(item["isBlocked"] == "N" for item in data)


def test_block_fixed_scenario(client):
    """PUT .BAT bloqueia apenas bat"""
    response = client.put(f"{API}/fixed", json={"extName": ".BAT", "isBlocked": "Y"})

    assert response.status_code == 200
    assert response.json() == {"success": True}

    flags = {item["extName"]: item["isBlocked"] for item in client.get(f"{API}/fixed").json()}
    assert flags["bat"] == "Y"
    assert all(flag == "N" for name, flag in flags.items() if name != "bat")


def test_update_fixed_not_found(client):
    response = client.put(f"{API}/fixed", json={"extName": "nope", "isBlocked": "Y"})

    assert response.status_code == 404
    assert "detail" in response.json()


def test_update_fixed_invalid(client):
    assert client.put(f"{API}/fixed", json={"extName": "exe", "isBlocked": "X"}).status_code == 400
    assert client.put(f"{API}/fixed", json={"extName": "", "isBlocked": "Y"}).status_code == 400
    assert client.put(f"{API}/fixed", json={"isBlocked": "Y"}).status_code == 400
    assert client.put(f"{API}/fixed", json={"extName": "exe", "isBlocked": True}).status_code == 400


def test_malformed_body_is_bad_request(client):
    response = client.post(
        f"{API}/custom",
        content="not json",
        headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json() == {"detail": "Requisição inválida"}


def test_custom_round_trip(client):
    """Adiciona Tmp, lista, remove e tenta remover de novo"""
    response = client.post(f"{API}/custom", json={"extName": "Tmp"})
    assert response.status_code == 200
    assert response.json() == {"success": True}

    custom = client.get(f"{API}/custom").json()
    assert [item["extName"] for item in custom] == ["tmp"]
    assert set(custom[0]) == {"extId", "extName"}
    ext_id = custom[0]["extId"]

    assert client.delete(f"{API}/custom/{ext_id}").json() == {"success": True}
    assert all(item["extId"] != ext_id for item in client.get(f"{API}/custom").json())

    assert client.delete(f"{API}/custom/{ext_id}").status_code == 404


def test_add_custom_twice_conflicts(client):
    assert client.post(f"{API}/custom", json={"extName": "zzz"}).status_code == 200

    response = client.post(f"{API}/custom", json={"extName": "zzz"})
    assert response.status_code == 409


def test_add_custom_fixed_name_conflicts(client):
    response = client.post(f"{API}/custom", json={"extName": "bat"})

    assert response.status_code == 409
    assert client.get(f"{API}/custom").json() == []


def test_add_custom_invalid(client):
    assert client.post(f"{API}/custom", json={}).status_code == 400
    assert client.post(f"{API}/custom", json={"extName": ""}).status_code == 400
    assert client.post(f"{API}/custom", json={"extName": " . "}).status_code == 400
    assert client.post(f"{API}/custom", json={"extName": "a" * 21}).status_code == 400


def test_add_custom_capacity(client, db):
    db.add_all([
        FileExtension(ext_type=ExtensionType.CUSTOM.value, ext_name=f"c{i}", is_blocked="Y")
        for i in range(MAX_CUSTOM_EXTENSIONS)
    ])
    db.commit()

    response = client.post(f"{API}/custom", json={"extName": "onemore"})

    assert response.status_code == 400
    assert len(client.get(f"{API}/custom").json()) == MAX_CUSTOM_EXTENSIONS
    assert client.get(f"{API}/summary").json()["customCount"] == MAX_CUSTOM_EXTENSIONS


def test_delete_nonexistent(client):
    assert client.delete(f"{API}/custom/999999").status_code == 404


def test_delete_invalid_id(client):
    assert client.delete(f"{API}/custom/abc").status_code == 400
    assert client.delete(f"{API}/custom/0").status_code == 400
    assert client.delete(f"{API}/custom/-1").status_code == 400


def test_delete_fixed_id_not_found(client):
    fixed_id = client.get(f"{API}/fixed").json()[0]["extId"]

    assert client.delete(f"{API}/custom/{fixed_id}").status_code == 404
    assert len(client.get(f"{API}/fixed").json()) == len(FIXED_EXTENSIONS)


def test_summary(client):
    client.post(f"{API}/custom", json={"extName": "sh"})

    assert client.get(f"{API}/summary").json() == {
        "customCount": 1,
        "customLimit": MAX_CUSTOM_EXTENSIONS,
        "maxNameLength": 20,
    }


def test_database_failure_is_opaque(client, db):
    """Erro do banco vira 500 sem detalhes internos"""
    db.execute(text("DROP TABLE file_extensions"))
    db.commit()

    response = client.get(f"{API}/fixed")

    assert response.status_code == 500
    assert response.json() == {"detail": "Erro interno no banco de dados"}
    assert "file_extensions" not in response.text


def test_delete_huge_id_not_found(client):
    response = client.delete(f"{API}/custom/99999999999999999999")

    assert response.status_code == 404
    assert "detail" in response.json()


def test_add_custom_dotted_names_are_cleaned(client):
    assert client.post(f"{API}/custom", json={"extName": "..foo"}).status_code == 200
    assert client.post(f"{API}/custom", json={"extName": ". bar"}).status_code == 200

    assert [item["extName"] for item in client.get(f"{API}/custom").json()] == ["foo", "bar"]
    assert client.post(f"{API}/custom", json={"extName": ".foo"}).status_code == 409
