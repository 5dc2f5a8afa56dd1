import reset_password
from home_service_api.app.core.security import verify_password


def test_reset_password_updates_hash(write_collection, read_collection, capsys):
    write_collection("users", [
        {"id": 1, "email": "an@example.com", "password": "old", "name": "An", "phone": "1"},
    ])
    assert reset_password.main(["--email", "an@example.com", "--password", "n3w-pass"]) == 0
    user = read_collection("users")[0]
    assert verify_password("n3w-pass", user["password"])
    assert "Password updated" in capsys.readouterr().out


def test_reset_password_unknown_user(write_collection, read_collection):
    write_collection("users", [
        {"id": 1, "email": "an@example.com", "password": "old", "name": "An", "phone": "1"},
    ])
    assert reset_password.main(["--email", "nobody@example.com", "--password", "x"]) == 2
    assert read_collection("users")[0]["password"] == "old"


def test_reset_password_missing_users_file(data_dir):
    assert reset_password.main(["--email", "an@example.com", "--password", "x"]) == 1
