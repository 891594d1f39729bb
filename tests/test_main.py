import sys
import logging
import os
import pytest
import matplotlib
matplotlib.use("Agg")

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from treebench.main import main


def _set_env(monkeypatch, **values):
    for name in ("N", "MAX_VALUE"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    for name, value in values.items():
        monkeypatch.setenv(name, value)


def test_main_runs_session(monkeypatch, tmp_path, capsys):
    _set_env(monkeypatch, N="500", MAX_VALUE="1000")
    # Sem .env no diretório atual
    monkeypatch.chdir(tmp_path)

    assert main(["--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Altura da árvore BST" in out
    assert "Altura da árvore AVL" in out
    assert out.count("Encontrado:") == 4


def test_main_invalid_configuration(monkeypatch, tmp_path, caplog):
    _set_env(monkeypatch, N="abc", MAX_VALUE="1000")
    monkeypatch.chdir(tmp_path)

    assert main([]) == 1
    assert "N" in caplog.text


def test_main_scalability_with_plot(monkeypatch, tmp_path, capsys):
    _set_env(monkeypatch, N="50", MAX_VALUE="1000")
    monkeypatch.chdir(tmp_path)
    plot = tmp_path / "out" / "plot.png"

    assert main(["--seed", "2", "--sizes", "50", "200", "--plot", str(plot)]) == 0
    assert plot.exists()
    assert "Gráfico salvo" in capsys.readouterr().out


def test_main_reads_env_file_from_working_directory(monkeypatch, tmp_path, capsys):
    _set_env(monkeypatch)
    (tmp_path / ".env").write_text("N=30\nMAX_VALUE=100\n")
    monkeypatch.chdir(tmp_path)

    assert main(["--seed", "3"]) == 0
    assert "com nós 30" in capsys.readouterr().out


@pytest.mark.parametrize("size", ["0", "-5", "mil"])
def test_main_rejects_invalid_sizes(monkeypatch, tmp_path, capsys, size):
    _set_env(monkeypatch, N="50", MAX_VALUE="1000")
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit) as excinfo:
        main(["--scalability", "--sizes", "100", size])
    assert excinfo.value.code == 2
    assert "--sizes" in capsys.readouterr().err


def test_build_is_logged_only_at_debug(monkeypatch, tmp_path, caplog):
    _set_env(monkeypatch, N="20", MAX_VALUE="100")
    monkeypatch.chdir(tmp_path)
    caplog.set_level(logging.INFO)

    assert main(["--seed", "4"]) == 0
    assert "Construindo árvore" not in caplog.text, "Construção já aparece no relatório impresso"
