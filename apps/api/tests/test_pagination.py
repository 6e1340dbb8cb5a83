import pytest

from sample_search.services.search import InvalidPageError, compute_page_window, parse_page


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_missing_page_means_no_pagination(raw):
    assert parse_page(raw) is None


@pytest.mark.parametrize("raw,expected", [("1", 1), ("2", 2), (" 3 ", 3), (4, 4)])
def test_valid_pages(raw, expected):
    assert parse_page(raw) == expected


@pytest.mark.parametrize("raw", ["0", "-1", "abc", "1.5", "2e3", 0, -3, True])
def test_invalid_pages_raise(raw):
    with pytest.raises(InvalidPageError) as exc:
        parse_page(raw)
    assert exc.value.param == "page"
    assert exc.value.raw_value == raw


def test_offsets_and_limit():
    for page in range(1, 4):
        window = compute_page_window(37, page)
        assert window.offset == (page - 1) * 15
        assert window.limit == 15


def test_last_page_holds_remainder():
    window = compute_page_window(37, 3)
    assert window.total_pages == 3
    assert window.current_page_items == 7


def test_full_last_page_reports_page_size():
    window = compute_page_window(30, 2)
    assert window.total_pages == 2
    assert window.current_page_items == 15


def test_non_last_page_is_full():
    assert compute_page_window(25, 1).current_page_items == 15
    assert compute_page_window(25, 2).current_page_items == 10


def test_empty_result_has_one_empty_page():
    window = compute_page_window(0, 1)
    assert window.total_pages == 1
    assert window.current_page_items == 0


def test_page_past_the_end_is_empty():
    window = compute_page_window(20, 5)
    assert window.total_pages == 2
    assert window.offset == 60
    assert window.current_page_items == 0


def test_custom_page_size():
    window = compute_page_window(11, 3, page_size=5)
    assert window.total_pages == 3
    assert window.offset == 10
    assert window.current_page_items == 1
