"""
Unit Tests for Digest Primitives
================================
Constant-time comparison, legacy digests and the SHA-256 prehash.
"""

import hashlib

import pytest


class TestSafeEq:
    """Tests for constant-time comparison."""

    def test_equal_values(self):
        """Identical values should compare equal."""
        from pwhash_core import safe_eq

        assert safe_eq("abc123", "abc123") is True
        assert safe_eq(b"\x00\xff", b"\x00\xff") is True
        assert safe_eq("", "") is True

    def test_differing_byte(self):
        """Any differing byte should fail, wherever it is."""
        from pwhash_core import safe_eq

        assert safe_eq("abc123", "xbc123") is False
        assert safe_eq("abc123", "abc12x") is False

    def test_differing_length(self):
        """Different lengths should never compare equal."""
        from pwhash_core import safe_eq

        assert safe_eq("abc", "abcd") is False
        assert safe_eq("", "d41d8cd98f00b204e9800998ecf8427e") is False

    def test_mixed_str_and_bytes(self):
        """Strings compare by their UTF-8 bytes."""
        from pwhash_core import safe_eq

        assert safe_eq("pässword", "pässword".encode("utf-8")) is True

    def test_non_bytes_operand_raises(self):
        """Values that are neither str nor bytes-like are refused."""
        from pwhash_core import safe_eq

        with pytest.raises(TypeError):
            safe_eq(b"\x00\x00\x00", 3)
        with pytest.raises(TypeError):
            safe_eq(None, "")


class TestLegacyDigests:
    """Tests for SHA-1 and MD5 legacy digests."""

    def test_md5_empty(self):
        """MD5 of empty salt and password is the empty-string digest."""
        from pwhash_core import hash_md5

        assert hash_md5("", "") == "d41d8cd98f00b204e9800998ecf8427e"

    def test_sha1_empty(self):
        """SHA-1 of empty input should be the well-known digest."""
        from pwhash_core import hash_sha1

        assert hash_sha1("", "") == "da39a3ee5e6b4b0d3255bfef95601890afd80709"

    def test_salt_comes_first(self):
        """Salt is hashed before the password."""
        from pwhash_core import hash_md5, hash_sha1

        # salt="pass", password="word" -> digest of "password"
        assert hash_sha1("word", "pass") == "5baa61e4c9b93f3f0682250b6cf8331b7ee68fd8"
        assert hash_md5("word", "pass") == "5f4dcc3b5aa765d61d8327deb882cf99"
        assert hash_sha1("pass", "word") != hash_sha1("word", "pass")

    def test_output_format(self):
        """Digests are lowercase hex of fixed width."""
        from pwhash_core import hash_md5, hash_sha1

        sha1 = hash_sha1("secret", "NaCl")
        md5 = hash_md5("secret", "NaCl")

        assert len(sha1) == 40
        assert len(md5) == 32
        assert sha1 == sha1.lower()
        assert set(md5) <= set("0123456789abcdef")

    def test_unicode_encoded_as_utf8(self):
        """Non-ASCII text is hashed as UTF-8."""
        from pwhash_core import hash_sha1

        expected = hashlib.sha1("sälzpässwörd".encode("utf-8")).hexdigest()
        assert hash_sha1("pässwörd", "sälz") == expected


class TestUnixCrypt:
    """Tests for crypt(3)."""

    def test_format(self):
        """Output is a 13-character crypt string starting with the salt."""
        from pwhash_core import unix_crypt

        result = unix_crypt("password", "ab")

        assert len(result) == 13
        assert result.startswith("ab")

    def test_deterministic(self):
        """Same password and salt give the same hash."""
        from pwhash_core import unix_crypt

        assert unix_crypt("hunter2", "xy") == unix_crypt("hunter2", "xy")
        assert unix_crypt("hunter2", "xy") != unix_crypt("hunter2", "xz")

    def test_only_first_eight_characters_count(self):
        """DES crypt ignores everything after the eighth character."""
        from pwhash_core import unix_crypt

        assert unix_crypt("abcdefgh", "ab") == unix_crypt("abcdefghXYZ", "ab")

    def test_invalid_salt_raises(self):
        """A salt the crypt implementation rejects raises NativeFailure."""
        from pwhash_core import NativeFailure, unix_crypt

        with pytest.raises(NativeFailure) as exc_info:
            unix_crypt("password", "!!")

        assert exc_info.value.algorithm == "unix_crypt"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_compat_returns_empty_sentinel(self):
        """The compatibility function returns '' on failure."""
        from pwhash_core import hash_unix_crypt, safe_eq

        result = hash_unix_crypt("password", "!!")

        assert result == ""
        assert safe_eq(result, hash_unix_crypt("password", "ab")) is False

    def test_compat_matches_on_success(self):
        """The compatibility function agrees with unix_crypt on valid input."""
        from pwhash_core import hash_unix_crypt, unix_crypt

        assert hash_unix_crypt("password", "ab") == unix_crypt("password", "ab")

    def test_stored_hash_as_salt(self):
        """Passing a stored crypt string as the salt reproduces it."""
        from pwhash_core import hash_unix_crypt, unix_crypt

        stored = unix_crypt("password", "ab")

        assert unix_crypt("password", stored) == stored
        assert hash_unix_crypt("password", stored) == stored
        assert hash_unix_crypt("wrong", stored) != stored

    def test_single_character_salt(self):
        """A one-character salt is too short for crypt(3)."""
        from pwhash_core import hash_unix_crypt

        assert hash_unix_crypt("password", "a") == ""


class TestSha256Prehash:
    """Tests for the bcrypt prehash."""

    def test_empty_password(self):
        """SHA-256 of empty input."""
        from pwhash_core import hash_sha256

        assert hash_sha256("") == (
            "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        )

    def test_known_value(self):
        """SHA-256 of 'password'."""
        from pwhash_core import hash_sha256

        assert hash_sha256("password") == (
            "5e884898da28047151d0e56f8dc6292773603d0d6aabbdd62a11ef721d1542d8"
        )

    def test_fits_bcrypt(self):
        """Long passwords sharing a 72-byte prefix stay distinct through bcrypt."""
        import bcrypt
        from pwhash_core import hash_sha256

        prefix = "x" * 80
        first = hash_sha256(prefix + "first").encode("ascii")
        second = hash_sha256(prefix + "second").encode("ascii")

        assert len(first) == 64
        stored = bcrypt.hashpw(first, bcrypt.gensalt(rounds=4))

        assert bcrypt.checkpw(first, stored) is True
        assert bcrypt.checkpw(second, stored) is False
