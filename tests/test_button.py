from iotclassroom.button import Button


def pin(levels):
    values = iter(levels)
    return lambda: next(values)


def test_pressed_follows_level_with_pull_down():
    button = Button(pin([1, 0]))
    assert button.is_pressed() is True
    assert button.is_pressed() is False


def test_pressed_inverted_with_pull_up():
    button = Button(pin([0, 1]), pull_up=True)
    assert button.is_pressed() is True
    assert button.is_pressed() is False


def test_click_only_on_rising_edge():
    button = Button(pin([1, 1, 0, 0, 1]))
    assert [button.is_clicked() for _ in range(5)] == [True, False, False, False, True]


def test_click_with_pull_up():
    button = Button(pin([1, 0, 0, 1, 0]), pull_up=True)
    assert [button.is_clicked() for _ in range(5)] == [False, True, False, False, True]


def test_no_click_while_idle():
    button = Button(lambda: 0)
    assert not any(button.is_clicked() for _ in range(4))