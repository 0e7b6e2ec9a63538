#  Licensed under the Apache License, Version 2.0 (the "License"); you may
#  not use this file except in compliance with the License. You may obtain
#  a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
#  WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
#  License for the specific language governing permissions and limitations
#  under the License.

import copy
import itertools

import quotaconf.conf.quota


def list_opts():
    return [
        (quotaconf.conf.quota.QUOTAS_CFG_GROUP,
         copy.deepcopy(list(itertools.chain(
             quotaconf.conf.quota.core_quota_opts,
             quotaconf.conf.quota.security_group_quota_opts,
             quotaconf.conf.quota.l3_quota_opts,
             quotaconf.conf.quota.firewall_quota_opts))))
    ]
