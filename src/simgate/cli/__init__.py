# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
CLI modules for simgate.

Available commands:
- run: Queue a simulation run, wait for it and gate on its score
- dry-run: Show the queue request without sending it
"""
