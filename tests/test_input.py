from asterclick.input import FrameInput


def test_starts_empty():
    frame = FrameInput()
    assert frame.click is None
    assert not frame.toggle_pause
    assert not frame.quit


def test_last_click_wins():
    frame = FrameInput()
    frame.push_click(1, 2)
    frame.push_click(30, 40)
    assert frame.click == (30, 40)


def test_intents_accumulate_until_reset():
    frame = FrameInput()
    frame.request_pause_toggle()
    frame.request_pause_toggle()
    frame.request_quit()
    assert frame.toggle_pause
    assert frame.quit

    frame.reset_frame()
    assert frame.click is None
    assert not frame.toggle_pause
    assert not frame.quit
