from kernelkit.configuration import Configuration
from kernelkit.helper import (
    create_complete_reply,
    create_error_reply,
    create_info_reply,
    create_inspect_reply,
    create_is_complete_reply,
    create_successful_reply,
    extract_filename,
    print_starting_message,
    should_print_version,
)


def _config():
    return Configuration(
        transport="tcp",
        ip="127.0.0.1",
        control_port="50160",
        shell_port="57503",
        stdin_port="52597",
        iopub_port="40885",
        hb_port="42540",
        signature_scheme="hmac-sha256",
        key="secret",
    )


def test_print_starting_message():
    message = print_starting_message(_config())
    expected_start = (
        "Starting kernel...\n"
        "\n"
        "If you want to connect to this kernel from an other client, just copy and paste "
        "the following content inside of a `kernel.json` file. And then run for example:\n"
        "\n"
        "# jupyter console --existing kernel.json\n"
        "\n"
        "kernel.json\n"
        "```\n"
        "{\n"
        '    "transport": "tcp",\n'
    )
    assert message.find(expected_start) == 0


def test_print_starting_message_lists_settings():
    message = print_starting_message(_config())
    assert '    "shell_port": 57503,\n' in message
    assert '    "key": "secret"\n}\n```' in message
    assert message.endswith("```")


def test_extract_filename():
    assert extract_filename(["-f", "connection.json"]) == "connection.json"


def test_extract_filename_after_other_arguments():
    assert extract_filename(["kernel", "-f", "connection.json", "--debug"]) == "connection.json"


def test_extract_filename_without_value():
    assert extract_filename(["kernel", "-f"]) == ""
    assert extract_filename([]) == ""


def test_should_print_version():
    assert should_print_version(["--version"]) is True
    assert should_print_version(["-f", "connection.json"]) is False


def test_error_reply():
    reply = create_error_reply("bad value", "ValueError", ["line 1"])
    assert reply == {
        "status": "error",
        "ename": "ValueError",
        "evalue": "bad value",
        "traceback": ["line 1"],
    }


def test_successful_reply_defaults():
    assert create_successful_reply() == {"status": "ok", "payload": [], "user_expressions": {}}


def test_successful_reply_with_payload():
    payload = [{"source": "page", "start": 0}]
    reply = create_successful_reply(payload)
    assert reply["payload"] == payload


def test_complete_reply():
    reply = create_complete_reply(["a.test1", "a.test2"], 2, 6)
    assert reply == {
        "status": "ok",
        "matches": ["a.test1", "a.test2"],
        "cursor_start": 2,
        "cursor_end": 6,
        "metadata": {},
    }


def test_inspect_reply():
    reply = create_inspect_reply(True, {"text/plain": ""}, {"text/plain": ""})
    assert reply == {
        "status": "ok",
        "found": True,
        "data": {"text/plain": ""},
        "metadata": {"text/plain": ""},
    }
    assert create_inspect_reply()["found"] is False


def test_is_complete_reply():
    assert create_is_complete_reply("complete") == {"status": "complete", "indent": ""}
    assert create_is_complete_reply("incomplete", "   ")["indent"] == "   "


def test_info_reply():
    reply = create_info_reply(
        "", "cpp_test", "1.0.0", "cpp", "14.0.0", "text/x-c++src", ".cpp", "", "", "", "test_kernel"
    )
    assert reply["status"] == "ok"
    assert reply["implementation"] == "cpp_test"
    assert reply["implementation_version"] == "1.0.0"
    assert reply["language_info"]["name"] == "cpp"
    assert reply["language_info"]["version"] == "14.0.0"
    assert reply["language_info"]["mimetype"] == "text/x-c++src"
    assert reply["language_info"]["file_extension"] == ".cpp"
    assert reply["banner"] == "test_kernel"
    assert reply["debugger"] is False
    assert reply["help_links"] == []