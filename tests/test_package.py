import poeditor


def test_public_api_exports() -> None:
    assert poeditor.__version__ == poeditor.VERSION
    for name in poeditor.__all__:
        assert hasattr(poeditor, name), name
