from dasel.oflag import StringList


def test_string_list():
    flag = StringList()
    assert str(flag) == "[]"
    flag.set("a")
    assert str(flag) == "[a]"
    flag.set("b")
    assert str(flag) == "[a b]"
    assert flag.strings == ["a", "b"]


def test_string_list_type():
    assert StringList().type() == "Pass multiple times to add multiple values."