import pytest
from pydantic import ValidationError

from tournament_site.schemas.registration import RegistrationData


def test_valid_payload(make_payload):
    data = RegistrationData.model_validate(make_payload("Alpha", "ALP"))

    assert data.team_name == "Alpha"
    assert data.logo_url is None
    assert data.game_ids == ["ALP001", "ALP002", "ALP003", "ALP004", "ALP005"]


def test_blank_logo_becomes_none(make_payload):
    payload = make_payload("Alpha", "ALP")
    payload["logo_url"] = ""

    assert RegistrationData.model_validate(payload).logo_url is None


def test_invalid_logo_url(make_payload):
    payload = make_payload("Alpha", "ALP")
    payload["logo_url"] = "not a url"

    with pytest.raises(ValidationError):
        RegistrationData.model_validate(payload)


@pytest.mark.parametrize("team_name", ["Al", "A" * 51])
def test_team_name_length(make_payload, team_name):
    with pytest.raises(ValidationError):
        RegistrationData.model_validate(make_payload(team_name, "ALP"))


@pytest.mark.parametrize("game_id", ["1234", "1" * 21])
def test_game_id_length(make_payload, game_id):
    payload = make_payload("Alpha", "ALP")
    payload["participants"][0]["game_id"] = game_id

    with pytest.raises(ValidationError):
        RegistrationData.model_validate(payload)


def test_nickname_length(make_payload):
    payload = make_payload("Alpha", "ALP")
    payload["participants"][2]["nickname"] = "ab"

    with pytest.raises(ValidationError):
        RegistrationData.model_validate(payload)


@pytest.mark.parametrize("count", [4, 6])
def test_exactly_five_participants(make_payload, count):
    payload = make_payload("Alpha", "ALP")
    members = payload["participants"]
    payload["participants"] = members[:count] if count < 5 else members + [{"nickname": "extra", "game_id": "EXTRA01"}]

    with pytest.raises(ValidationError):
        RegistrationData.model_validate(payload)


def test_duplicate_game_id_within_team(make_payload):
    payload = make_payload("Alpha", "ALP")
    payload["participants"][4]["game_id"] = "ALP001"

    with pytest.raises(ValidationError, match="ID Game yang sama"):
        RegistrationData.model_validate(payload)


def test_duplicate_nickname_within_team(make_payload):
    payload = make_payload("Alpha", "ALP")
    payload["participants"][1]["nickname"] = "Alpha-p1"

    with pytest.raises(ValidationError, match="nickname yang sama"):
        RegistrationData.model_validate(payload)


def test_logo_url_is_kept_verbatim(make_payload):
    payload = make_payload("Alpha", "ALP", logo_url="https://cdn.example.com")

    assert RegistrationData.model_validate(payload).logo_url == "https://cdn.example.com"


def test_logo_url_fits_the_column(make_payload):
    prefix = "https://cdn.example.com/"
    payload = make_payload("Alpha", "ALP", logo_url=prefix + "a" * (512 - len(prefix)))
    assert len(RegistrationData.model_validate(payload).logo_url) == 512

    payload["logo_url"] = payload["logo_url"] + "a"
    with pytest.raises(ValidationError):
        RegistrationData.model_validate(payload)
