import json

from booking_api.config import DEFAULT_PATCH_TEST_DATA
from booking_api.patch_data import PatchDataHelper, create_patch_request

FULL_FIELDS = {"firstname", "lastname", "totalprice", "depositpaid", "bookingdates", "additionalneeds"}


def test_empty_field_list_gives_empty_payload():
    assert create_patch_request([]) == {}
    assert create_patch_request() == {}


def test_all_gives_full_payload():
    data = create_patch_request(["all"])
    assert set(data) == FULL_FIELDS
    assert set(data["bookingdates"]) == {"checkin", "checkout"}


def test_all_wins_over_other_fields():
    assert set(create_patch_request(["firstname", "all"])) == FULL_FIELDS


def test_single_field():
    data = create_patch_request(["totalprice"])
    assert list(data) == ["totalprice"]
    assert 500 <= data["totalprice"] <= 2000


def test_checkin_only():
    data = create_patch_request(["bookingdates.checkin"])
    assert data == {"bookingdates": {"checkin": data["bookingdates"]["checkin"]}}


def test_checkout_only():
    data = create_patch_request(["bookingdates.checkout"])
    assert list(data) == ["bookingdates"]
    assert list(data["bookingdates"]) == ["checkout"]


def test_both_nested_dates():
    data = create_patch_request(["bookingdates.checkin", "bookingdates.checkout"])
    assert set(data["bookingdates"]) == {"checkin", "checkout"}
    assert data["bookingdates"]["checkout"] > data["bookingdates"]["checkin"]


def test_bookingdates_fills_both():
    data = create_patch_request(["bookingdates"])
    assert set(data) == {"bookingdates"}
    assert set(data["bookingdates"]) == {"checkin", "checkout"}


def test_unknown_fields_are_ignored():
    assert create_patch_request(["nickname"]) == {}
    assert set(create_patch_request(["nickname", "lastname"])) == {"lastname"}


def test_packaged_patch_cases_load():
    cases = PatchDataHelper(DEFAULT_PATCH_TEST_DATA).get_patch_test_cases()
    assert cases
    assert all(c.expected_status == 200 for c in cases)
    assert any(c.fields_to_update == ["firstname"] for c in cases)


def test_patch_cases_from_file(tmp_path):
    path = tmp_path / "cases.json"
    path.write_text(json.dumps({"testCases": [
        {"description": "names", "fieldsToUpdate": ["firstname", "lastname"], "expectedStatus": 200},
    ]}))

    cases = PatchDataHelper(path).get_patch_test_cases()
    assert len(cases) == 1
    assert cases[0].description == "names"
    assert cases[0].fields_to_update == ["firstname", "lastname"]
    assert cases[0].expected_status == 200


def test_missing_file_gives_no_cases(tmp_path, caplog):
    assert PatchDataHelper(tmp_path / "missing.json").get_patch_test_cases() == []
    assert "Error reading the patch test case file" in caplog.text


def test_malformed_json_gives_no_cases(tmp_path):
    path = tmp_path / "cases.json"
    path.write_text("{not json")
    assert PatchDataHelper(path).get_patch_test_cases() == []


def test_invalid_case_gives_no_cases(tmp_path):
    path = tmp_path / "cases.json"
    path.write_text(json.dumps({"testCases": [{"description": "no status"}]}))
    assert PatchDataHelper(path).get_patch_test_cases() == []


def test_missing_test_cases_key(tmp_path):
    path = tmp_path / "cases.json"
    path.write_text(json.dumps({"other": []}))
    assert PatchDataHelper(path).get_patch_test_cases() == []


def test_reversed_nested_dates_keep_checkout_after_checkin():
    for fields in (["bookingdates.checkout", "bookingdates.checkin"], ["bookingdates", "bookingdates.checkin"]):
        for _ in range(100):
            dates = create_patch_request(fields)["bookingdates"]
            assert set(dates) == {"checkin", "checkout"}
            assert dates["checkout"] > dates["checkin"]


def test_non_list_test_cases_gives_no_cases(tmp_path, caplog):
    path = tmp_path / "cases.json"
    path.write_text(json.dumps({"testCases": 5}))
    assert PatchDataHelper(path).get_patch_test_cases() == []
    assert "testCases is not a list" in caplog.text


def test_non_utf8_file_gives_no_cases(tmp_path, caplog):
    path = tmp_path / "cases.json"
    path.write_bytes(b'{"testCases": ["\xff\xfe"]}')
    assert PatchDataHelper(path).get_patch_test_cases() == []
    assert "Error reading the patch test case file" in caplog.text
