"""
Tests for deep value mapping (TreeMapper / deep_map_values).
"""

import re
from collections import OrderedDict, namedtuple
from datetime import date, datetime

import pytest

from kittylib import (
    deep_map_values,
    get_path,
    TreeMapper,
    TraversalConfig,
    CycleError,
    CollectErrorsPolicy,
    ConfigurationError,
)
from kittylib.testing import CallRecorder, make_self_referencing, make_nested, leaf_paths


SAMPLE = {
    'name': 'kitty',
    'tags': ['a', 'b'],
    'owner': {'id': 7, 'roles': [{'role': 'admin'}, {'role': None}]},
    'empty': {},
    'flags': (True, False),
}


class TestMappingBasics:
    """Shape, identity and path contracts."""

    def test_identity_callback_returns_equal_structure(self):
        """Mapping with the identity callback reproduces the input."""
        result = deep_map_values(SAMPLE, lambda value, path: value)
        assert result == SAMPLE

    def test_containers_are_new_objects(self):
        """Every container level is rebuilt, not shared."""
        result = deep_map_values(SAMPLE, lambda value, path: value)
        assert result is not SAMPLE
        assert result['owner'] is not SAMPLE['owner']
        assert result['owner']['roles'] is not SAMPLE['owner']['roles']
        assert result['owner']['roles'][0] is not SAMPLE['owner']['roles'][0]

    def test_input_is_not_mutated(self):
        data = {'a': [1, 2], 'b': {'c': 3}}
        deep_map_values(data, lambda value, path: value * 2)
        assert data == {'a': [1, 2], 'b': {'c': 3}}

    def test_leaves_are_replaced(self):
        result = deep_map_values({'a': 1, 'b': {'c': 2}, 'd': [3, 4]}, lambda v, p: v * 10)
        assert result == {'a': 10, 'b': {'c': 20}, 'd': [30, 40]}

    def test_paths_are_dot_joined(self):
        recorder = CallRecorder()
        deep_map_values({'a': {'b': [{'c': 1}]}}, recorder)
        assert recorder.calls == [(1, 'a.b.0.c')]

    def test_root_leaf_gets_empty_path(self):
        recorder = CallRecorder(lambda value, path: value + 1)
        assert deep_map_values(41, recorder) == 42
        assert recorder.calls == [(41, '')]

    def test_callback_called_once_per_leaf(self):
        """Each leaf path is visited exactly once."""
        recorder = CallRecorder()
        deep_map_values(SAMPLE, recorder)

        by_path = recorder.calls_by_path()
        assert all(len(values) == 1 for values in by_path.values())
        assert set(by_path) == {
            'name', 'tags.0', 'tags.1', 'owner.id',
            'owner.roles.0.role', 'owner.roles.1.role',
            'flags.0', 'flags.1',
        }

    def test_leaf_paths_resolve_back_to_leaves(self):
        """get_path on each reported path yields the leaf the callback saw."""
        recorder = CallRecorder()
        deep_map_values(SAMPLE, recorder)
        for value, path in recorder.calls:
            assert get_path(SAMPLE, path) == value

    def test_empty_containers_have_no_leaves(self):
        recorder = CallRecorder()
        assert deep_map_values({'a': {}, 'b': []}, recorder) == {'a': {}, 'b': []}
        assert recorder.call_count == 0

    def test_key_order_is_preserved(self):
        data = OrderedDict([('z', 1), ('a', 2), ('m', 3)])
        result = deep_map_values(data, lambda v, p: v)
        assert list(result) == ['z', 'a', 'm']
        assert type(result) is dict

    def test_non_string_keys_in_paths(self):
        assert leaf_paths({1: {2: 'x'}}) == ['1.2']


class TestContainerVariants:
    """Sequence and mapping variants survive the rebuild."""

    def test_tuples_stay_tuples(self):
        result = deep_map_values({'t': (1, 2)}, lambda v, p: v + 1)
        assert result == {'t': (2, 3)}
        assert isinstance(result['t'], tuple)

    def test_namedtuples_keep_their_type(self):
        Point = namedtuple('Point', 'x y')
        result = deep_map_values([Point(1, 2)], lambda v, p: v * 2)
        assert result == [Point(2, 4)]
        assert type(result[0]) is Point

    def test_opaque_leaves(self):
        """Dates, patterns, callables, sets and strings are never decomposed."""
        func = len
        pattern = re.compile('x')
        data = {
            'when': datetime(2020, 1, 2),
            'day': date(2020, 1, 2),
            'pattern': pattern,
            'func': func,
            'set': {1, 2},
            'text': 'abc',
            'raw': b'abc',
        }
        recorder = CallRecorder()
        result = deep_map_values(data, recorder)

        assert result == data
        assert sorted(recorder.paths()) == sorted(data)
        assert result['pattern'] is pattern
        assert result['func'] is func

    def test_custom_leaf_types(self):
        class Bag(dict):
            pass

        bag = Bag(a=1)
        recorder = CallRecorder()
        result = deep_map_values({'bag': bag}, recorder, leaf_types=[Bag])

        assert result['bag'] is bag
        assert recorder.calls == [(bag, 'bag')]


class TestDepthAndCycles:
    """max_depth and strict-mode cycle detection."""

    def test_max_depth_hands_containers_to_callback(self):
        data = make_nested(3, leaf='deep')
        recorder = CallRecorder()
        deep_map_values(data, recorder, max_depth=1)
        assert recorder.calls == [({'child': {'child': 'deep'}}, 'child')]

    def test_max_depth_zero_maps_root_whole(self):
        data = {'a': 1}
        recorder = CallRecorder()
        deep_map_values(data, recorder, max_depth=0)
        assert recorder.calls == [(data, '')]

    def test_strict_mode_raises_on_cycle(self):
        node = make_self_referencing(value=1)
        with pytest.raises(CycleError) as excinfo:
            deep_map_values(node, lambda v, p: v, strict=True)
        assert excinfo.value.path == 'self'

    def test_policy_continues_past_cycle(self):
        node = make_self_referencing(value=1)
        policy = CollectErrorsPolicy()

        result = deep_map_values(node, lambda v, p: v * 2, policy=policy)

        assert result['value'] == 2
        assert result['self'] is node
        assert len(policy.errors) == 1
        assert policy.errors[0]['error_type'] == 'CycleError'
        assert policy.errors[0]['operation'] == 'deep_map_values'

    def test_shared_references_are_not_cycles(self):
        """The same container under two siblings is mapped twice, not flagged."""
        shared = {'n': 1}
        data = {'a': shared, 'b': shared}
        result = deep_map_values(data, lambda v, p: v + 1, strict=True)
        assert result == {'a': {'n': 2}, 'b': {'n': 2}}
        assert result['a'] is not result['b']


class TestMapperConfiguration:

    def test_invalid_config_is_rejected(self):
        with pytest.raises(ConfigurationError, match="max_depth cannot be negative"):
            TreeMapper(TraversalConfig(max_depth=-1))

    def test_all_config_errors_reported_together(self):
        config = TraversalConfig(max_depth=-1, leaf_types=('nope',))
        with pytest.raises(ConfigurationError) as excinfo:
            TreeMapper(config)
        assert 'max_depth' in str(excinfo.value)
        assert 'leaf_types' in str(excinfo.value)

    def test_callback_errors_propagate(self):
        def explode(value, path):
            raise RuntimeError(f"boom at {path}")

        with pytest.raises(RuntimeError, match="boom at a"):
            deep_map_values({'a': 1}, explode)

    def test_explicit_config_overrides_keywords(self):
        config = TraversalConfig.shallow(max_depth=0)
        recorder = CallRecorder()
        deep_map_values({'a': 1}, recorder, max_depth=None, config=config)
        assert recorder.call_count == 1
        assert recorder.paths() == ['']
