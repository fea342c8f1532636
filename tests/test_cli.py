import json

from apple_calendar_mcp import cli


def test_parser_defaults_to_mcp_over_stdio():
    args = cli.build_parser().parse_args([])
    assert args.command is None

    args = cli.build_parser().parse_args(["mcp", "--transport", "streamable-http", "--port", "9001"])
    assert args.transport == "streamable-http"
    assert args.port == 9001


def test_tools_command_prints_descriptors(capsys):
    cli.main(["tools"])
    tools = json.loads(capsys.readouterr().out)
    assert [tool["name"] for tool in tools] == [
        "list_calendars",
        "list_events",
        "create_event",
        "update_event",
        "delete_event",
    ]


def test_default_command_starts_stdio_server(monkeypatch):
    started = {}

    def fake_run(transport="stdio", host=None, port=None):
        started.update(transport=transport, host=host, port=port)

    monkeypatch.setattr(cli, "configure_logging", lambda: None)
    monkeypatch.setattr("apple_calendar_mcp.services.mcp.run_mcp_server", fake_run)
    cli.main([])
    assert started == {"transport": "stdio", "host": None, "port": None}
