from relaybot.adapters.search_source import format_search_results
from relaybot.bot.templates import search_result_block
from relaybot.models.provider import SearchItem


def test_search_result_block_shape() -> None:
    assert search_result_block("A snippet", "https://example.com") == "A snippet\nMore info: https://example.com"


def test_format_search_results_caps_and_separates_blocks() -> None:
    items = [SearchItem(snippet=f"s{i}", link=f"https://e.com/{i}") for i in range(5)]
    text = format_search_results(items, max_results=3)
    blocks = text.split("\n\n")
    assert blocks == [
        "s0\nMore info: https://e.com/0",
        "s1\nMore info: https://e.com/1",
        "s2\nMore info: https://e.com/2",
    ]
