import unittest

from gauthmgr.errors import ConfigIncompleteError, ConfigInvalidShapeError
from gauthmgr.models import DEFAULT_TOKEN_URI, ClientConfig


class TestClientConfig(unittest.TestCase):
    def test_from_dict_installed(self) -> None:
        cfg = ClientConfig.from_dict(
            {
                "installed": {
                    "client_id": "id1",
                    "client_secret": "sec1",
                    "redirect_uris": ["https://a", "https://b"],
                }
            }
        )
        self.assertEqual(cfg.kind, "installed")
        self.assertEqual(cfg.redirect_uris, ("https://a", "https://b"))
        self.assertEqual(cfg.redirect_uri, "https://a")
        self.assertEqual(cfg.token_uri, DEFAULT_TOKEN_URI)

    def test_from_dict_keeps_custom_uris(self) -> None:
        cfg = ClientConfig.from_dict(
            {
                "web": {
                    "client_id": "id",
                    "client_secret": "s",
                    "redirect_uris": ["https://x"],
                    "auth_uri": "https://auth.example",
                    "token_uri": "https://token.example",
                }
            }
        )
        self.assertEqual(cfg.auth_uri, "https://auth.example")
        self.assertEqual(
            cfg.to_client_config()["web"]["token_uri"], "https://token.example"
        )

    def test_empty_web_falls_back_to_installed(self) -> None:
        cfg = ClientConfig.from_dict(
            {
                "web": {},
                "installed": {
                    "client_id": "id",
                    "client_secret": "s",
                    "redirect_uris": ["https://x"],
                },
            }
        )
        self.assertEqual(cfg.kind, "installed")

    def test_non_object_is_invalid_shape(self) -> None:
        with self.assertRaises(ConfigInvalidShapeError) as ctx:
            ClientConfig.from_dict(["web"])
        self.assertEqual(ctx.exception.details["received_keys"], [])

        with self.assertRaises(ConfigInvalidShapeError):
            ClientConfig.from_dict({"web": "client-id"})

    def test_missing_fields(self) -> None:
        with self.assertRaises(ConfigIncompleteError) as ctx:
            ClientConfig.from_dict({"installed": {"client_id": "id", "redirect_uris": []}})
        self.assertEqual(ctx.exception.details["missing"], ["client_secret", "redirect_uris"])

    def test_redirect_uris_must_be_list(self) -> None:
        with self.assertRaises(ConfigIncompleteError):
            ClientConfig.from_dict(
                {"web": {"client_id": "id", "client_secret": "s", "redirect_uris": "https://x"}}
            )


if __name__ == "__main__":
    unittest.main()
