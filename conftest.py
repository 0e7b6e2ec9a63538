# Licensed under the Apache License, Version 2.0 (the "License"); you may
# not use this file except in compliance with the License. You may obtain
# a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations
# under the License.

"""pytest plumbing for testscenarios.

The test modules rely on ``load_tests = load_tests_apply_scenarios``,
which stestr/unittest honour but pytest ignores. Expand each scenario
into its own TestCase subclass so pytest runs them the same way.
"""

import unittest

from _pytest import unittest as pytest_unittest


class _ScenarioTestCase(pytest_unittest.UnitTestCase):
    """UnitTestCase whose class is generated rather than a module attribute."""

    def _getobj(self):
        return self._scenario_cls


def pytest_pycollect_makeitem(collector, name, obj):
    if not (isinstance(obj, type) and issubclass(obj, unittest.TestCase)):
        return None
    scenarios = obj.__dict__.get('scenarios')
    if not scenarios:
        return None
    items = []
    for scenario_name, params in scenarios:
        attrs = dict(params)
        attrs['scenarios'] = None
        cls = type('%s(%s)' % (name, scenario_name), (obj,), attrs)
        cls.__module__ = obj.__module__
        item = _ScenarioTestCase.from_parent(collector, name=cls.__name__)
        item._scenario_cls = cls
        items.append(item)
    return items
