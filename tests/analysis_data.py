"""Polymer analysis records used across the test suite."""

TEST_ELEMENT = {
    "tagName": "test-element",
    "name": "TestElement",
    "events": [
        {"name": "test-event-a"},
        {"name": "test-event-b"},
        {"name": "test2-changed"},
        {"name": "test3-changed"},
    ],
    "properties": [
        {"name": "test1", "type": "string", "privacy": "public"},
        {"name": "test2", "type": "number", "privacy": "public"},
        {"name": "test3", "type": "string", "privacy": "public", "readOnly": True},
        {
            "name": "test4",
            "type": "boolean",
            "privacy": "public",
            "metadata": {"polymer": {"readOnly": True}},
        },
        {"name": "_test5", "type": "string", "privacy": "private"},
        {"name": "callbackProp", "type": "Function", "privacy": "public"},
        {"name": "importPath", "type": "string", "privacy": "public"},
        {"name": "rootPath", "type": "string", "privacy": "public"},
    ],
    "methods": [
        {"name": "publicMethod", "privacy": "public", "params": []},
        {
            "name": "publicMethodWithArguments",
            "privacy": "public",
            "params": [{"name": "arg1"}, {"name": "arg2"}],
        },
        {"name": "_privateMethod", "privacy": "private", "params": []},
        {
            "name": "attributeChangedCallback",
            "privacy": "public",
            "params": [{"name": "name"}, {"name": "old"}, {"name": "value"}],
        },
        {"name": "connectedCallback", "privacy": "public", "params": []},
        {"name": "valueGetter", "type": "string", "privacy": "public", "accessor": True},
        {"name": "otherThing", "type": "Object", "privacy": "public"},
    ],
}

OTHER_ELEMENT = {
    "tagName": "other-element",
    "name": "OtherElement",
    "events": [],
    "properties": [{"name": "label", "type": "string", "privacy": "public"}],
    "methods": [],
}
