import pytest

from console.models.system_config_model import SystemConfigModel


URL = "/v1/admin/system-config/features"


def test_get_flags(client, auth_headers, seeded_catalog):
    response = client.get(URL, headers=auth_headers)
    data = response.get_json()["data"]

    assert response.status_code == 200
    assert data["config_id"] == "platform_config_v1"
    assert data["features"] == {"customBranding": True, "apiAccess": True}


def test_get_flags_without_config_document(client, auth_headers, mongo):
    response = client.get(URL, headers=auth_headers)
    assert response.get_json()["data"]["features"] == {}


def test_disable_flag_hides_feature_from_catalog(client, auth_headers, seeded_catalog):
    response = client.patch(URL, json={"config_key": "teamMembers", "enabled": False}, headers=auth_headers)

    assert response.status_code == 200
    assert response.get_json()["data"]["features"]["teamMembers"] is False

    catalog = client.get("/v1/admin/plans/feature-catalog", headers=auth_headers).get_json()["data"]
    blocked = {b["featureId"]: b for b in catalog["blocked"]}
    assert blocked["role_based_access"]["unmetDependencies"] == ["team_members"]


def test_flag_payload_is_validated(client, auth_headers, mongo):
    response = client.patch(URL, json={"config_key": "teamMembers"}, headers=auth_headers)
    assert response.status_code == 422


@pytest.mark.parametrize("config_key", ["beta.export", "$where", "team members"])
def test_flag_key_must_be_a_single_path_segment(client, auth_headers, seeded_catalog, config_key):
    response = client.patch(URL, json={"config_key": config_key, "enabled": False}, headers=auth_headers)

    assert response.status_code == 422
    stored = seeded_catalog["systemConfig"].find_one({"_id": "platform_config_v1"})
    assert stored["features"] == {"customBranding": True, "apiAccess": True}


def test_model_rejects_dotted_config_key(seeded_catalog):
    with pytest.raises(ValueError):
        SystemConfigModel.set_feature_flag("platform_config_v1", "beta.export", False, "admin-1")
