from concurrent.futures import ThreadPoolExecutor

from wsconnector.networking.shared import SharedSettings


def test_set_once_keeps_first_value():
    settings = SharedSettings()

    assert settings.set_once("key", "first") is True
    assert settings.set_once("key", "second") is False
    assert settings.get("key") == "first"


def test_get_returns_default_for_missing_key():
    assert SharedSettings().get("missing", "fallback") == "fallback"


def test_set_once_has_a_single_winner_under_contention():
    settings = SharedSettings()

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(
            pool.map(lambda i: settings.set_once("key", i), range(64))
        )

    assert results.count(True) == 1
    assert settings.get("key") == results.index(True)
