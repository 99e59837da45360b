from auth import get_password_hash, verify_password


def test_hash_round_trip_with_non_ascii_password():
    hashed = get_password_hash("kata sandi rahasia ñ")
    assert verify_password("kata sandi rahasia ñ", hashed)
    assert not verify_password("kata sandi rahasia n", hashed)


def test_verify_rejects_malformed_hash():
    assert verify_password("anything", "not-a-bcrypt-hash") is False
