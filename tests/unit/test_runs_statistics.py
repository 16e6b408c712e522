"""
Unit tests for repeated runs, index export and split statistics.
"""
import json

import pytest

from evalsplits import (
    CrossValidationFoldGenerator,
    GeneratorConfig,
    InvalidPolicyError,
    KFoldPolicy,
    RandomSplitGenerator,
    RandomSplitPolicy,
    SplitRunsGenerator,
    drain_splits,
    get_split_statistics,
    label_distribution,
    to_indexed_splits
)


@pytest.mark.unit
class TestSplitRunsGenerator:
    """Tests for SplitRunsGenerator."""

    def test_consecutive_seeds(self, labeled_dataset):
        """Test that run r uses seed + r - 1."""
        runs = SplitRunsGenerator(
            labeled_dataset, KFoldPolicy(folds=5), GeneratorConfig(seed=42), num_runs=3
        ).get_all_runs()

        assert [run.run for run in runs] == [1, 2, 3]
        assert [run.seed for run in runs] == [42, 43, 44]
        assert all(run.n_splits == 5 for run in runs)

    def test_run_matches_direct_generator(self, labeled_dataset):
        """Test that each run is reproducible with a standalone generator."""
        runs = SplitRunsGenerator(
            labeled_dataset, KFoldPolicy(folds=5), GeneratorConfig(seed=42), num_runs=2
        ).get_all_runs()
        direct = CrossValidationFoldGenerator(
            labeled_dataset, KFoldPolicy(folds=5), GeneratorConfig(seed=43)
        ).get_all_splits()

        assert [s.test_original_indices for s in runs[1].splits] == \
            [s.test_original_indices for s in direct]
        assert [s.train_original_indices for s in runs[1].splits] == \
            [s.train_original_indices for s in direct]

    def test_invalid_num_runs(self, labeled_dataset):
        """Test that at least one run is required."""
        with pytest.raises(InvalidPolicyError):
            SplitRunsGenerator(labeled_dataset, KFoldPolicy(folds=5), num_runs=0)

    def test_default_config(self, labeled_dataset):
        """Test that the default seed starts the runs."""
        runs_generator = SplitRunsGenerator(labeled_dataset, RandomSplitPolicy(), num_runs=2)
        assert runs_generator.seed_for_run(1) == 42
        assert runs_generator.seed_for_run(2) == 43


@pytest.mark.unit
class TestIndexedSplits:
    """Tests for to_indexed_splits."""

    def test_metadata(self, labeled_dataset):
        """Test dataset metadata keys."""
        runs = SplitRunsGenerator(labeled_dataset, KFoldPolicy(folds=4), num_runs=1).get_all_runs()
        result = to_indexed_splits(labeled_dataset, runs)

        assert result['dataset.name'] == "iris"
        assert result['dataset.num_instances'] == 100
        assert result['dataset.num_attributes'] == 4
        assert result['dataset.attribute.0.name'] == "sepal"
        assert result['dataset.attribute.0.type'] == "numeric"
        assert result['dataset.attribute.3.type'] == "categorical"

    def test_runs_and_folds(self, labeled_dataset):
        """Test run and fold entries."""
        runs = SplitRunsGenerator(labeled_dataset, KFoldPolicy(folds=4), num_runs=2).get_all_runs()
        result = to_indexed_splits(labeled_dataset, runs)

        assert len(result['runs']) == 2
        assert result['runs'][1]['seed'] == 43
        folds = result['runs'][0]['folds']
        assert [fold['fold'] for fold in folds] == [1, 2, 3, 4]
        assert folds[0]['test'] == runs[0].splits[0].test_original_indices

    def test_json_serializable(self, labeled_dataset):
        """Test that the result can be written as JSON."""
        runs = SplitRunsGenerator(labeled_dataset, RandomSplitPolicy(), num_runs=1).get_all_runs()
        text = json.dumps(to_indexed_splits(labeled_dataset, runs))
        assert json.loads(text)['runs'][0]['folds'][0]['fold'] == 1


@pytest.mark.unit
class TestSplitStatistics:
    """Tests for label_distribution and get_split_statistics."""

    def test_label_distribution(self, labeled_dataset, unlabeled_dataset):
        """Test label counts."""
        assert label_distribution(labeled_dataset) == {'a': 60, 'b': 30, 'c': 10}
        assert label_distribution(unlabeled_dataset) == {}

    def test_statistics(self, labeled_dataset):
        """Test per-fold sizes and label counts."""
        splits = CrossValidationFoldGenerator(labeled_dataset, KFoldPolicy(folds=5)).get_all_splits()
        stats = get_split_statistics(splits)

        assert stats['n_splits'] == 5
        assert stats['avg_train_size'] == 80
        assert stats['avg_test_size'] == 20
        for entry in stats['splits']:
            assert entry['test_label_counts'] == {'a': 12, 'b': 6, 'c': 2}
            assert entry['train_label_counts'] == {'a': 48, 'b': 24, 'c': 8}

    def test_empty_statistics(self):
        """Test statistics of no splits."""
        stats = get_split_statistics([])
        assert stats['n_splits'] == 0
        assert stats['avg_train_size'] == 0


@pytest.mark.unit
class TestDrainSplits:
    """Tests for drain_splits."""

    def test_drains_in_order(self, labeled_dataset):
        """Test that generators are drained one after the other."""
        generators = [
            CrossValidationFoldGenerator(labeled_dataset, KFoldPolicy(folds=3)),
            RandomSplitGenerator(labeled_dataset)
        ]
        splits = drain_splits(generators)

        assert [split.fold_number for split in splits] == [1, 2, 3, 1]
        assert all(generator.is_exhausted() for generator in generators)
