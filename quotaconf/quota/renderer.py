# Copyright (c) 2015 OpenStack Foundation.  All rights reserved.
#
#    Licensed under the Apache License, Version 2.0 (the "License"); you may
#    not use this file except in compliance with the License. You may obtain
#    a copy of the License at
#
#         http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
#    WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
#    License for the specific language governing permissions and limitations
#    under the License.

"""
Render quota settings into entries of the QUOTAS configuration section.
"""

import collections

from oslo_config import cfg
from oslo_log import log as logging

from quotaconf.common import exceptions
from quotaconf.conf import quota as quota_conf

LOG = logging.getLogger(__name__)

QUOTA_OPTS = collections.OrderedDict(
    (opt.dest, opt) for opt in quota_conf.all_quota_opts)


class ConfigEntry(collections.namedtuple('ConfigEntry',
                                         ['section', 'key', 'value'])):
    """A single key/value setting within a configuration section."""

    __slots__ = ()

    @property
    def path(self):
        return '%s/%s' % (self.section, self.key)


def _expected_type(opt):
    if isinstance(opt, cfg.IntOpt):
        return 'integer'
    return 'string'


def _validate_value(opt, value):
    if isinstance(opt, cfg.IntOpt):
        # bool is an int subclass but never a valid quota
        valid = isinstance(value, int) and not isinstance(value, bool)
    else:
        valid = isinstance(value, str)
    if not valid:
        raise exceptions.InvalidValueError(option=opt.dest, value=value,
                                           expected=_expected_type(opt))


class QuotaConfig(collections.namedtuple('QuotaConfig', list(QUOTA_OPTS))):
    """Effective values of every recognized quota option."""

    __slots__ = ()

    @classmethod
    def from_overrides(cls, overrides=None):
        """Merge caller overrides onto the option defaults.

        Every override is checked before anything is built: unknown names
        raise UnknownOptionError, values of the wrong type raise
        InvalidValueError.
        """
        overrides = overrides or {}
        unknown = set(overrides) - set(QUOTA_OPTS)
        if unknown:
            raise exceptions.UnknownOptionError(
                unknown=sorted(unknown, key=str))
        for name, value in overrides.items():
            _validate_value(QUOTA_OPTS[name], value)

        return cls(**dict((name, overrides.get(name, opt.default))
                          for name, opt in QUOTA_OPTS.items()))

    @classmethod
    def from_conf(cls, conf=cfg.CONF):
        group = conf[quota_conf.QUOTAS_CFG_GROUP]
        return cls.from_overrides(
            dict((name, group[name]) for name in QUOTA_OPTS))

    def to_dict(self):
        return dict(self._asdict())

    def entries(self):
        return [ConfigEntry(quota_conf.QUOTAS_CFG_GROUP, name, value)
                for name, value in zip(self._fields, self)]


def render(overrides=None):
    """Render the QUOTAS section entries for the given overrides.

    :param overrides: mapping of option name to value; options left out
                      take their default value.
    :returns: a list of ConfigEntry, one per recognized option.
    """
    entries = QuotaConfig.from_overrides(overrides).entries()
    LOG.debug("Rendered quota entries: %s",
              ', '.join('%s=%s' % (e.path, e.value) for e in entries))
    return entries


def apply(entries, conf=cfg.CONF):
    """Override configuration values with rendered entries."""
    quota_conf.register_missing_quota_opts(quota_conf.all_quota_opts, conf)
    for entry in entries:
        LOG.debug("Setting %(path)s to %(value)s",
                  {'path': entry.path, 'value': entry.value})
        conf.set_override(entry.key, entry.value, group=entry.section)


def format_entries(entries):
    """Format entries as INI text, one header per section."""
    sections = collections.OrderedDict()
    for entry in entries:
        sections.setdefault(entry.section, []).append(entry)

    lines = []
    for section, section_entries in sections.items():
        if lines:
            lines.append('')
        lines.append('[%s]' % section)
        lines.extend('%s = %s' % (e.key, e.value) for e in section_entries)
    return '\n'.join(lines) + '\n' if lines else ''
