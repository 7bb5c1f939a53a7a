import io

import pytest

from wfrest.jsonvalue import Json


def test_build_object_and_dump_compact():
    js = Json()
    js["test"] = 123
    js["json"] = "test json"
    assert js.dump() == '{"test":123,"json":"test json"}'


def test_parse_valid_text():
    text = """
        {
            "numbers": [1, 2, 3]
        }
    """
    js = Json.parse(text)
    assert js.is_valid()
    assert js.get() == {"numbers": [1, 2, 3]}


def test_parse_invalid_trailing_comma():
    js = Json.parse('{"strings": ["extra", "comma", ]}')
    assert not js.is_valid()
    assert js.dump() == ""


def test_parse_rejects_nan():
    assert not Json.parse("[NaN]").is_valid()


def test_dump_round_trip_compact_and_indented():
    js = Json({"a": [1, True, None, "x\n"], "b": {"c": 2.5}})
    assert Json.parse(js.dump()).get() == js.get()
    indented = js.dump(4)
    assert "\n" in indented
    assert Json.parse(indented).get() == js.get()


def test_nested_placeholder_assignment():
    js = Json()
    js["a"]["b"] = 1
    assert js.get() == {"a": {"b": 1}}


def test_watcher_changes_propagate():
    js = Json.parse('{"x": {"y": 1}}')
    js["x"]["y"] = 2
    assert js["x"]["y"].get() == 2


def test_getitem_on_root_null_makes_object():
    js = Json()
    placeholder = js["a"]
    assert js.is_object()
    assert placeholder.is_null()
    assert js.size() == 0


def test_array_push_back_extends_with_list():
    js = Json()
    js.push_back(1)
    js.push_back("s")
    js.push_back(["a", "b"])
    assert js.size() == 4
    assert js.get() == [1, "s", "a", "b"]


def test_push_back_json_array_nests():
    js = Json()
    js.push_back(Json(["a", "b"]))
    assert js.get() == [["a", "b"]]


def test_push_back_key_with_list_nests():
    js = Json()
    js.push_back("names", ["a", "b"])
    js.push_back("flag", False)
    assert js.get() == {"names": ["a", "b"], "flag": False}


def test_placeholder_push_back_materializes():
    js = Json()
    js["list"].push_back(1)
    js["obj"].push_back("k", True)
    assert js.get() == {"list": [1], "obj": {"k": True}}


def test_array_index_access_and_assignment():
    js = Json([1, 2, 3])
    js[1] = "two"
    assert js[1].get() == "two"
    assert js[3].is_null()
    assert js[-1].is_null()
    with pytest.raises(IndexError):
        js[3] = 0


def test_type_errors_on_wrong_container():
    with pytest.raises(TypeError):
        Json("text").push_back(1)
    with pytest.raises(TypeError):
        Json([1])["key"] = 1
    with pytest.raises(TypeError):
        Json({"a": 1})[0] = 1


@pytest.mark.parametrize(
    "value, expected",
    [
        ("s", "string"),
        (1.5, "number"),
        ({}, "object"),
        ([], "array"),
        (True, "true"),
        (False, "false"),
        (None, "null"),
    ],
)
def test_type_str(value, expected):
    assert Json(value).type_str() == expected


def test_predicates():
    assert Json(3).is_number()
    assert Json(False).is_boolean()
    assert Json("x").is_string()
    assert Json({}).is_object()
    assert Json([]).is_array()
    assert Json().is_null()


def test_size_and_empty():
    assert Json().empty()
    assert Json().size() == 1
    assert not Json("x").empty()
    assert Json([]).empty()
    js = Json([1, 2])
    assert len(js) == js.size() == 2
    assert not js.empty()


def test_clear_by_type():
    text = Json("abc")
    text.clear()
    assert text.get() == ""
    number = Json(5)
    number.clear()
    assert number.get() == 0
    flag = Json(True)
    flag.clear()
    assert flag.get() is True
    obj = Json({"a": 1})
    obj.clear()
    assert obj.get() == {}


def test_clear_on_watcher_detaches_from_parent():
    js = Json.parse('{"a": [1, 2]}')
    watcher = js["a"]
    watcher.clear()
    assert watcher.get() == []
    assert js["a"].get() == [1, 2]


def test_iteration_keys_values_and_reverse():
    js = Json.parse('{"a": 1, "b": "x"}')
    assert [item.key() for item in js] == ["a", "b"]
    assert [item.get() for item in js] == [1, "x"]
    assert [item.key() for item in reversed(js)] == ["b", "a"]


def test_iteration_over_scalar_is_empty():
    assert list(Json(7)) == []


def test_array_element_key_is_empty():
    js = Json(["a"])
    assert js[0].key() == ""
    assert [item.key() for item in js] == [""]


def test_has_and_erase():
    js = Json({"a": 1, "b": 2})
    assert js.has("a")
    js.erase("a")
    assert not js.has("a")
    js.erase("missing")
    assert js.get() == {"b": 2}
    arr = Json([1, 2, 3])
    arr.erase(0)
    arr.erase(10)
    assert arr.get() == [2, 3]


def test_copy_is_independent():
    js = Json({"a": [1]})
    duplicate = js.copy()
    duplicate["a"].push_back(2)
    assert js.get() == {"a": [1]}
    assert duplicate.get() == {"a": [1, 2]}


def test_parse_from_file_object_and_path(tmp_path):
    js = Json.parse(io.StringIO('{"k": [true]}'))
    assert js.get() == {"k": [True]}
    path = tmp_path / "doc.json"
    path.write_text('["v"]', encoding="utf-8")
    assert Json.parse(path).get() == ["v"]


def test_parse_none_gives_null():
    js = Json.parse(None)
    assert js.is_valid()
    assert js.is_null()


def test_str_is_compact_dump():
    js = Json({"k": "v"})
    assert str(js) == js.dump(0)


def test_push_back_wrong_arity():
    with pytest.raises(TypeError):
        Json().push_back()