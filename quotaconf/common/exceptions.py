# Copyright 2011 VMware, Inc
# All Rights Reserved.
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

from neutron_lib import exceptions

from quotaconf._i18n import _


class QuotaConfigError(exceptions.BadRequest):
    message = _("Invalid quota configuration: %(reason)s.")


class UnknownOptionError(QuotaConfigError):
    message = _("Unknown quota options: %(unknown)s.")

    def __init__(self, **kwargs):
        self.unknown = kwargs.get('unknown', [])
        kwargs['unknown'] = ', '.join(str(u) for u in self.unknown)
        super(UnknownOptionError, self).__init__(**kwargs)


class InvalidValueError(QuotaConfigError):
    message = _("Invalid value %(value)r for quota option %(option)s, "
                "expected %(expected)s.")

    def __init__(self, **kwargs):
        self.option = kwargs.get('option')
        self.value = kwargs.get('value')
        super(InvalidValueError, self).__init__(**kwargs)
