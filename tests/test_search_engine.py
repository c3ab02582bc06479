import sys

import pytest

import main
from ngram_search import CatalogSearchEngine


@pytest.fixture
def engine(catalog_file):
    engine = CatalogSearchEngine(catalog_path=catalog_file, config_dict={"NGRAM_SIZE": 3})
    engine.build_index()
    return engine


def test_query_before_build_raises(catalog_file):
    engine = CatalogSearchEngine(catalog_path=catalog_file)
    with pytest.raises(RuntimeError):
        engine.search("DAR")
    with pytest.raises(RuntimeError):
        engine.best_match("DAR")
    assert engine.get_stats() == {"error": "Index not built"}


def test_best_match_uses_aliases(engine):
    assert engine.best_match("DAR") == "DAR"
    assert engine.best_match("statement of work") == "SOW"
    assert engine.best_match("technical") == "TECH"


def test_search_returns_labels(engine):
    results = engine.search("sow", top_k=2)
    assert results[0][0] == "SOW"
    assert len(results) <= 2


def test_search_uses_configured_top_k(catalog_file):
    engine = CatalogSearchEngine(catalog_path=catalog_file, config_dict={"TOP_K_RESULTS": 2})
    engine.build_index()
    assert len(engine.search("sar")) == 2


def test_short_query_falls_back_to_suggestion(engine):
    assert engine.best_match("sa") is None
    assert engine.suggest("sa") == "SAR"
    assert engine.match("sa") == "SAR"
    assert engine.match("dar") == "DAR"


def test_suggestion_disabled(catalog_file):
    engine = CatalogSearchEngine(catalog_path=catalog_file, config_dict={"AUTO_CORRECT_ENABLED": False})
    engine.build_index()
    assert engine.suggest("sa") is None
    assert engine.match("sa") is None


def test_suggestion_maps_alias_to_label(engine):
    assert engine.suggest("techical") == "TECH"


def test_add_entries_without_catalog_file(tmp_path):
    engine = CatalogSearchEngine(catalog_path=tmp_path / "missing.txt")
    engine.add_entries(["AEM", ("SOW", ["statement of work"])])
    engine.build_index()

    assert engine.best_match("dev aem") == "AEM"
    assert engine.best_match("work") == "SOW"


def test_missing_catalog_file_raises(tmp_path):
    engine = CatalogSearchEngine(catalog_path=tmp_path / "missing.txt")
    with pytest.raises(FileNotFoundError):
        engine.build_index()


def test_get_stats(engine):
    stats = engine.get_stats()
    assert stats["ngram_size"] == 3
    assert stats["num_labels"] == 4
    assert stats["num_names"] == 6


def test_show_results(engine, capsys):
    engine.show_results("dar", engine.search("dar"))
    assert "[[DAR]]" in capsys.readouterr().out

    engine.show_results("sa", engine.search("sa"))
    assert "Did you mean: SAR?" in capsys.readouterr().out


def test_cli_best_match(catalog_file, monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["ngram-search", "--catalog", str(catalog_file), "--query", "DAR", "--best"])
    main.main()
    assert capsys.readouterr().out.strip().splitlines()[-1] == "DAR"


def test_cli_no_match_exits_nonzero(catalog_file, monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["ngram-search", "--catalog", str(catalog_file), "--query", "zzzzzz", "--best"])
    with pytest.raises(SystemExit) as exc:
        main.main()
    assert exc.value.code == 1
    assert "No matching label found." in capsys.readouterr().out


def test_cli_stats_build_only(catalog_file, monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["ngram-search", "--catalog", str(catalog_file), "--build-only", "--stats"])
    main.main()
    out = capsys.readouterr().out
    assert "num_labels: 4" in out
    assert "Index building complete." in out
