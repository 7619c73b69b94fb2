import unittest

import gauthmgr


class TestPublicApi(unittest.TestCase):
    def test_top_level_exports_exist(self) -> None:
        self.assertTrue(hasattr(gauthmgr, "CredentialManager"))
        self.assertTrue(hasattr(gauthmgr, "AuthInfo"))
        self.assertTrue(hasattr(gauthmgr, "OAuth2Client"))
        self.assertTrue(hasattr(gauthmgr, "ClientConfig"))

        self.assertTrue(hasattr(gauthmgr, "GAuthMgrError"))
        self.assertTrue(hasattr(gauthmgr, "NotInitializedError"))
        self.assertTrue(hasattr(gauthmgr, "TokenMalformedError"))

    def test___all___is_defined(self) -> None:
        self.assertTrue(hasattr(gauthmgr, "__all__"))
        self.assertIn("CredentialManager", gauthmgr.__all__)
        self.assertIn("GAuthMgrError", gauthmgr.__all__)


if __name__ == "__main__":
    unittest.main()
