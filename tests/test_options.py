import copy

from asaogea.options import Options, RenderingOption, WindowOptions


def test_rendering_defaults():
    option = RenderingOption()
    assert option.validation_layers is True
    assert option.image_count == 2


def test_window_default_name():
    assert WindowOptions().name == "Asaogea"


def test_options_defaults_compose():
    options = Options()
    assert options.rendering == RenderingOption()
    assert options.main_window == WindowOptions()


def test_options_instances_are_independent():
    a = Options()
    b = Options()
    a.main_window.name = "Other"
    assert b.main_window.name == "Asaogea"


def test_deep_copy_is_independent():
    original = Options(rendering=RenderingOption(False, 3), main_window=WindowOptions("Main"))
    clone = copy.deepcopy(original)
    assert clone == original
    clone.rendering.image_count = 5
    assert original.rendering.image_count == 3