# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""pycors CORS core — configuration and the request decision engine."""

from pycors.cors.config import DEFAULT_CORS_CONFIG, CorsConfig, CorsProperties
from pycors.cors.headers import HeaderName, standard_name
from pycors.cors.methods import DEFAULT_METHODS, method_name
from pycors.cors.policy import CorsPolicy, Decision, RequestDescriptor, evaluate

__all__ = [
    "DEFAULT_CORS_CONFIG",
    "DEFAULT_METHODS",
    "CorsConfig",
    "CorsPolicy",
    "CorsProperties",
    "Decision",
    "HeaderName",
    "RequestDescriptor",
    "evaluate",
    "method_name",
    "standard_name",
]
