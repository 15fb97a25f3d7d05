# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""StudySync account signup, login and session service."""
