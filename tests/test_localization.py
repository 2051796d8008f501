import pytest

from localized_api.services.localization import (
    CultureNegotiator,
    RequestCulture,
    current_culture,
    make_cookie_value,
    parse_accept_language,
    parse_cookie_value,
)


def test_parse_accept_language_orders_by_quality():
    assert parse_accept_language("en;q=0.8, it-IT, it;q=0.9") == [("it-IT", 1.0), ("it", 0.9), ("en", 0.8)]


def test_parse_accept_language_drops_wildcard_zero_and_garbage():
    assert parse_accept_language("en;q=0, *;q=0.5, fr, de;q=abc, ,") == [("fr", 1.0)]
    assert parse_accept_language(None) == []
    assert parse_accept_language("") == []


def test_parse_accept_language_keeps_header_order_on_ties():
    assert parse_accept_language("it, en") == [("it", 1.0), ("en", 1.0)]


def test_match_exact_case_insensitive_and_parent():
    n = CultureNegotiator(["en", "it"])
    assert n.match("IT") == "it"
    assert n.match("it-IT") == "it"
    assert n.match("en_GB") == "en"
    assert n.match("fr-FR") is None
    assert n.match(None) is None


def test_match_without_parent_fallback():
    n = CultureNegotiator(["en", "it"], fallback_to_parent=False)
    assert n.match("it-IT") is None
    assert n.match("it") == "it"


def test_negotiate_prefers_query_string():
    n = CultureNegotiator(["en", "it"])
    assert n.negotiate(query_culture="it", accept_language="en") == RequestCulture("it", "it", "query")
    assert n.negotiate(query_ui_culture="en", accept_language="it") == RequestCulture("en", "en", "query")
    assert n.negotiate(query_culture="it", query_ui_culture="en") == RequestCulture("it", "en", "query")


def test_negotiate_uses_accept_language_then_default():
    n = CultureNegotiator(["en", "it"])
    assert n.negotiate(accept_language="fr, it;q=0.5") == RequestCulture("it", "it", "accept-language")
    assert n.negotiate(query_culture="xx", accept_language="de") == RequestCulture("en", "en", "default")
    assert n.negotiate() == RequestCulture("en", "en", "default")


def test_negotiator_requires_cultures():
    with pytest.raises(ValueError):
        CultureNegotiator([])


def test_current_culture_is_none_outside_request():
    assert current_culture() is None


def test_negotiate_query_unsupported_slot_gets_default():
    n = CultureNegotiator(["en", "it"])
    assert n.negotiate(query_culture="it", query_ui_culture="fr") == RequestCulture("it", "en", "query")
    assert n.negotiate(query_culture="fr", query_ui_culture="it") == RequestCulture("en", "it", "query")


def test_negotiate_query_with_no_supported_value_falls_through():
    n = CultureNegotiator(["en", "it"])
    assert n.negotiate(query_culture="fr", query_ui_culture="de", accept_language="it") == RequestCulture(
        "it", "it", "accept-language"
    )


def test_cookie_value_round_trip_format():
    assert make_cookie_value("it") == "c%3Dit%7Cuic%3Dit"
    assert parse_cookie_value(make_cookie_value("it", "en")) == ("it", "en")
    assert parse_cookie_value("c=it|uic=it") == ("it", "it")
    assert parse_cookie_value("c=|uic=it") == ("it", "it")


def test_cookie_value_malformed():
    assert parse_cookie_value(None) is None
    assert parse_cookie_value("it") is None
    assert parse_cookie_value("c=it") is None
    assert parse_cookie_value("uic=it|c=it") is None
    assert parse_cookie_value("c=|uic=") is None


def test_negotiate_cookie_between_query_and_header():
    n = CultureNegotiator(["en", "it"])
    cookie = make_cookie_value("it")
    assert n.negotiate(accept_language="en", cookie=cookie) == RequestCulture("it", "it", "cookie")
    assert n.negotiate(query_culture="en", accept_language="it", cookie=cookie) == RequestCulture("en", "en", "query")
    assert n.negotiate(accept_language="it", cookie=make_cookie_value("fr")) == RequestCulture(
        "it", "it", "accept-language"
    )
    assert n.negotiate(cookie="c=it|uic=fr") == RequestCulture("it", "en", "cookie")


def test_negotiate_tries_only_three_accept_language_values():
    n = CultureNegotiator(["en", "it"])
    assert n.negotiate(accept_language="fr, de, it") == RequestCulture("it", "it", "accept-language")
    assert n.negotiate(accept_language="fr, de, es, it") == RequestCulture("en", "en", "default")
    assert n.negotiate(accept_language="it;q=0.9, fr;q=0.5, de, es") == RequestCulture("it", "it", "accept-language")
