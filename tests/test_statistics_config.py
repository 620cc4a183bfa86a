"""
Tests for statistics and configuration export/import.
"""
import pytest

from voice_nlu import EngineConfiguration, UtteranceEngine
from voice_nlu.config import CONFIGURATION_VERSION
from voice_nlu.statistics import RATIOS, PipelineTrace, StatisticsCollector


class TestStatistics:

    def test_initial_report_is_zero(self, en_us):
        report = en_us.get_statistics()
        assert report["total_processed"] == 0
        for ratio in RATIOS:
            assert report[ratio] == 0.0

    def test_counters_after_processing(self, en_us):
        en_us.process_transcript("I'd like a cheeseburger and fries please")
        report = en_us.get_statistics()
        assert report["total_processed"] == 1
        assert report["dialect_words_found"] == 1
        assert report["grammar_corrections"] == 1
        assert report["replacements_made"] == 1
        assert report["context_matches"] == 0
        assert report["dialect_coverage"] == 1.0

        en_us.process_transcript("hello")
        report = en_us.get_statistics()
        assert report["total_processed"] == 2
        assert report["replacement_ratio"] == 0.5

    def test_reset(self, en_us):
        en_us.process_transcript("can i get chips")
        en_us.reset_statistics()
        assert en_us.get_statistics()["total_processed"] == 0
        assert en_us.get_statistics()["dialect_words_found"] == 0

    def test_collector_snapshot_and_restore(self):
        collector = StatisticsCollector()
        collector.record(PipelineTrace(dialect_words_found=2, replacements_made=1))
        snapshot = collector.snapshot()
        assert snapshot.total_processed == 1
        assert snapshot.dialect_words_found == 2

        restored = StatisticsCollector(snapshot)
        assert restored.report() == collector.report()


class TestConfiguration:

    def test_export_layout(self, en_us):
        en_us.add_custom_vocabulary("xyz", "Canonical")
        exported = en_us.export_configuration()
        assert exported["version"] == CONFIGURATION_VERSION
        assert exported["variant"] == "en-US"
        assert exported["context"] == "restaurant"
        assert exported["custom_vocabulary"] == [
            {"term": "xyz", "replacement": "Canonical", "confidence": 0.8, "source": "custom"},
        ]
        assert exported["toggles"]["handle_grammar"] is True
        assert exported["statistics"]["total_processed"] == 0

    def test_round_trip(self, en_us):
        en_us.add_custom_vocabulary("xyz", "Canonical")
        en_us.process_transcript("xyz and wings")
        exported = en_us.export_configuration()

        other = UtteranceEngine("fr-FR")
        assert other.import_configuration(exported) is True
        assert other.export_configuration() == exported
        assert other.variant == "en-US"
        assert other.get_context() == "restaurant"
        assert other.process_transcript("xyz and wings") == "Canonical and chicken wings"

    def test_import_model_instance(self, fr_ch):
        configuration = EngineConfiguration(variant="de-AT")
        assert fr_ch.import_configuration(configuration) is True
        assert fr_ch.variant == "de-AT"
        assert fr_ch.get_context() is None

    @pytest.mark.parametrize("snapshot", [
        {"variant": "xx-YY"},
        {"version": CONFIGURATION_VERSION + 1, "variant": "en-US"},
        {"variant": "en-US", "toggles": {"bogus": True}},
        {"variant": "en-US", "statistics": {"total_processed": -1}},
        {"variant": "en-US", "custom_vocabulary": [{"term": "", "replacement": "x"}]},
        {"custom_vocabulary": []},
        "not a snapshot",
        None,
    ])
    def test_malformed_import_changes_nothing(self, en_us, snapshot):
        en_us.add_custom_vocabulary("xyz", "Canonical")
        en_us.process_transcript("xyz")
        before = en_us.export_configuration()

        assert en_us.import_configuration(snapshot) is False
        assert en_us.export_configuration() == before
