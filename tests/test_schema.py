"""Tests for the extraction schema generator."""
import json

from click.testing import CliRunner

from calendar_server.schema import main, write_schema_file


def test_write_schema_file(tmp_path) -> None:
    path = write_schema_file(str(tmp_path / "agent.json"))
    schema = json.loads(path.read_text(encoding="utf-8"))

    assert schema["type"] == "object"
    assert set(schema["required"]) == {"year", "semester", "months"}
    assert schema["properties"]["year"]["minimum"] == 2000
    assert schema["properties"]["year"]["maximum"] == 2100
    assert schema["properties"]["semester"]["enum"] == ["1", "2"]

    event = schema["$defs"]["CalendarEvent"]
    assert set(event["required"]) == {"description", "category", "has_class"}
    assert event["properties"]["category"]["enum"] == [
        "feriado",
        "sem_aula",
        "avaliacao",
        "matricula",
        "evento_institucional",
        "reposicao",
        "outro",
    ]


def test_schema_command_writes_default_file(tmp_path) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=tmp_path):
        result = runner.invoke(main, [])

        assert result.exit_code == 0, result.output
        assert "agent.json gerado com sucesso!" in result.output
        with open("agent.json", encoding="utf-8") as f:
            assert json.load(f)["title"] == "Calendar"
