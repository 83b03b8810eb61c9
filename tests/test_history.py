from cmdrepl.history import History


def test_previous_returns_none_if_empty():
    assert History().previous() is None


def test_previous_returns_none_if_no_more_history():
    history = History()
    history.add_back("history")
    history.previous()
    assert history.previous() is None


def test_previous_returns_correct_history():
    history = History()
    history.add_back("history")
    assert history.previous() == "history"


def test_next_returns_none_if_empty():
    assert History().next() is None


def test_next_returns_none_if_no_more_history():
    history = History()
    history.add_front("history")
    assert history.next() is None


def test_next_returns_correct_history():
    history = History()
    history.add_front("history")
    history.add_front("prehistory")
    assert history.next() == "history"


def test_next_after_add_back_returns_none():
    history = History()
    history.add_back("a")
    assert history.next() is None


def test_walk_back_then_forward():
    history = History()
    for record in ["a", "b", "c"]:
        history.add_back(record)
    assert [history.previous(), history.previous(), history.previous()] == ["c", "b", "a"]
    assert history.previous() is None
    assert history.next() == "b"
    assert history.next() == "c"
    assert history.next() is None


def test_edit_replaces_record_under_cursor():
    history = History()
    history.add_front("")
    history.edit("typed")
    assert history.as_text() == "typed\n"


def test_edit_on_empty_history_does_nothing():
    history = History()
    history.edit("x")
    assert len(history) == 0
    assert history.as_text() == ""


def test_edit_past_end_does_nothing():
    history = History()
    history.add_back("kept")
    history.edit("changed")
    assert list(history) == ["kept"]


def test_as_text_keeps_order():
    history = History()
    history.add_back("second")
    history.add_front("first")
    history.add_back("third")
    assert history.as_text() == "first\nsecond\nthird\n"
    assert list(history) == ["first", "second", "third"]