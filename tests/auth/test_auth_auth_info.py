import unittest

from gauthmgr.auth import AuthInfo


class TestAuthInfo(unittest.TestCase):
    def test_auth_info_defaults(self) -> None:
        info = AuthInfo()
        self.assertEqual(info.credentials_var, "GOOGLE_CREDENTIALS")
        self.assertEqual(info.token_var, "GOOGLE_TOKEN")

    def test_auth_info_custom_names(self) -> None:
        info = AuthInfo(credentials_var="CREDS", token_var="TOKEN")
        self.assertEqual(info.credentials_var, "CREDS")

    def test_auth_info_blank_name(self) -> None:
        with self.assertRaises(ValueError):
            AuthInfo(credentials_var=" ")
        with self.assertRaises(ValueError):
            AuthInfo(token_var="")


if __name__ == "__main__":
    unittest.main()
