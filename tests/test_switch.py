from handykaraoke.switch import Switch


def test_starts_off_with_off_text():
    switch = Switch()
    assert switch.is_on is False
    assert switch.text == "OFF"


def test_on_notifies_once():
    switch = Switch()
    heard = []
    switch.switch_changed.append(heard.append)
    switch.on()
    switch.on()
    assert heard == [True]
    assert switch.text == "ON"


def test_off_notifies_only_when_on():
    switch = Switch()
    heard = []
    switch.switch_changed.append(heard.append)
    switch.off()
    switch.on()
    switch.off()
    assert heard == [True, False]


def test_toggle_notifies_user_listeners():
    switch = Switch()
    user = []
    switch.user_switch_changed.append(user.append)
    assert switch.toggle() is True
    assert switch.toggle() is False
    assert user == [True, False]


def test_programmatic_change_skips_user_listeners():
    switch = Switch()
    user = []
    switch.user_switch_changed.append(user.append)
    switch.on()
    assert user == []


def test_knob_offset():
    switch = Switch()
    assert switch.knob_offset(50, 20) == 2
    switch.on()
    assert switch.knob_offset(50, 20) == 32


def test_custom_texts():
    switch = Switch(on_text="yes", off_text="no")
    assert switch.text == "no"
    switch.toggle()
    assert switch.text == "yes"