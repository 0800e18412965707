from ssh_config_editor.tui.loading import LoadingProgress


def test_progress_runs_to_completion():
    p = LoadingProgress()
    ticks = 0
    while not p.tick():
        ticks += 1
    assert ticks == 99
    assert p.progress == 100
    assert p.tick() is True
    assert p.progress == 100


def test_render_bar():
    p = LoadingProgress()
    assert p.render_bar(10).endswith('[          ] 0%')
    p.progress = 50
    assert p.render_bar(10).endswith('[█████     ] 50%')
    assert p.render_bar().startswith('Loading SSH config... Please wait.')
