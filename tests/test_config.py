from helptree.config import Configuration, coerce_to_bool
from helptree.schema import COMMAND_SCHEMA, HELPTREE_SCHEMA
from helptree.validation import ConfigField, ConfigItems, ConfigValidator, _find_similar_key, format_config_error, validate_commands


def test_config_access(test_logger):
    conf = Configuration({"a": 1, "b": "test"}, logger=test_logger)
    assert conf["a"] == 1
    assert conf.get("b") == "test"
    assert conf.get("c", 3) == 3


def test_get_bool(test_logger):
    conf = Configuration(
        {
            "t1": True,
            "t2": "true",
            "t3": "yes",
            "f1": False,
            "f2": "false",
            "f3": "off",
            "invalid": "foo",
            "empty": "",
        },
        logger=test_logger,
    )

    assert conf.get_bool("t1") is True
    assert conf.get_bool("t2") is True
    assert conf.get_bool("t3") is True

    assert conf.get_bool("f1") is False
    assert conf.get_bool("f2") is False
    assert conf.get_bool("f3") is False

    # Non-empty unrecognized strings are truthy
    assert conf.get_bool("invalid") is True
    assert conf.get_bool("empty") is False

    assert conf.get_bool("missing", default=True) is True
    assert coerce_to_bool(None) is False


def test_get_int(test_logger):
    conf = Configuration({"a": 1, "b": "2", "c": "invalid"}, logger=test_logger)
    assert conf.get_int("a") == 1
    assert conf.get_int("b") == 2
    assert conf.get_int("c", default=10) == 10
    assert conf.get_int("missing", default=5) == 5


def test_get_str(test_logger):
    conf = Configuration({"a": "text", "b": 123}, logger=test_logger)
    assert conf.get_str("a") == "text"
    assert conf.get_str("b") == "123"
    assert conf.get_str("missing", "default") == "default"


def test_get_list(test_logger):
    conf = Configuration({"one": "a.b", "many": ["a", "b"], "bad": 3}, logger=test_logger)
    assert conf.get_list("one") == ["a.b"]
    assert conf.get_list("many") == ["a", "b"]
    assert conf.get_list("bad") == []
    assert conf.get_list("missing") == []


def test_schema_defaults(test_logger):
    conf = Configuration({"page_size_console": 50}, logger=test_logger, schema=HELPTREE_SCHEMA)
    assert conf.get_int("page_size_console") == 50
    assert conf.get_int("page_size_interactive") == 8
    assert conf.get_str("help_command") == "help"
    assert "page_size_interactive" not in conf


def test_sample_config(sample_config):
    assert sample_config.get_str("command_prefix") == "/"
    assert sample_config.get_list("permissions") == ["worldedit.fill"]
    assert sample_config.get_int("page_size_console") == 20


def test_find_similar_key():
    assert _find_similar_key("page_size_consol", ["page_size_console", "help_command"]) == "page_size_console"
    assert _find_similar_key("zzz", ["page_size_console"]) is None


def test_format_config_error():
    assert format_config_error("helptree", "foo", "bad") == "[helptree] Config error for 'foo': bad"
    assert format_config_error("helptree", "foo", "bad", "fix it") == "[helptree] Config error for 'foo': bad -> fix it"


def test_config_items_get():
    items = ConfigItems(ConfigField("a", int), ConfigField("b", (list, str)))
    assert items.get("a").type_name == "int"
    assert items.get("b").type_name == "list or str"
    assert items.get("c") is None


class TestConfigValidator:
    def test_valid(self, test_logger):
        config = {"page_size_console": 30, "permissions": "worldedit.*", "help_command": "//help"}
        assert ConfigValidator(config, "helptree", test_logger).validate(HELPTREE_SCHEMA) == []

    def test_wrong_type(self, test_logger):
        errors = ConfigValidator({"page_size_console": "many"}, "helptree", test_logger).validate(HELPTREE_SCHEMA)
        assert errors == ["[helptree] Config error for 'page_size_console': Expected int, got str -> Use page_size_console = 42 (without quotes)"]

    def test_bool_is_not_an_int(self, test_logger):
        errors = ConfigValidator({"page_size_console": True}, "helptree", test_logger).validate(HELPTREE_SCHEMA)
        assert len(errors) == 1

    def test_custom_validator(self, test_logger):
        errors = ConfigValidator({"page_size_interactive": 0, "include": [1]}, "helptree", test_logger).validate(HELPTREE_SCHEMA)
        assert errors == [
            "[helptree] Config error for 'page_size_interactive': Must be greater than 0, got 0",
            "[helptree] Config error for 'include': Every item must be a string",
        ]

    def test_bool_strings(self, test_logger):
        schema = ConfigItems(ConfigField("flag", bool))
        assert ConfigValidator({"flag": "yes"}, "s", test_logger).validate(schema) == []
        assert ConfigValidator({"flag": "maybe"}, "s", test_logger).validate(schema) != []

    def test_unknown_keys(self, test_logger, mocker):
        warning = mocker.patch.object(test_logger, "warning")
        warnings = ConfigValidator({"page_size": 3, "colour": 1}, "helptree", test_logger).warn_unknown_keys(HELPTREE_SCHEMA)
        assert warnings == [
            "[helptree] Unknown option 'page_size' (did you mean 'page_size_console'?)",
            "[helptree] Unknown option 'colour' - will be ignored",
        ]
        assert warning.call_count == 2


class TestValidateCommands:
    def test_sample(self, test_logger):
        from .conftest import CONFIG_1

        assert validate_commands(CONFIG_1["commands"], COMMAND_SCHEMA, test_logger) == []

    def test_not_a_table(self, test_logger):
        errors = validate_commands({"fill": "oops"}, COMMAND_SCHEMA, test_logger)
        assert errors == ["[commands] Config error for 'fill': Expected dict/section, got str"]

    def test_nested_type_error(self, test_logger):
        section = {"brush": {"commands": {"sphere": {"usage": 3}}}}
        errors = validate_commands(section, COMMAND_SCHEMA, test_logger)
        assert errors == ["[commands.brush.commands.sphere] Config error for 'usage': Expected str, got int -> Use usage = \"value\""]

    def test_alias_collision(self, test_logger):
        section = {"fill": {"aliases": ["f"]}, "flood": {"aliases": "F"}}
        errors = validate_commands(section, COMMAND_SCHEMA, test_logger)
        assert errors == ["[commands] Config error for 'flood': Alias 'F' is already used by 'fill'"]
