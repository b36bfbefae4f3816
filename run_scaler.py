#!/usr/bin/env python3
"""Wrapper script to run the ECS/ASG scaler from a checkout."""

import sys
import os

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from ecsscaler.cli import main

if __name__ == "__main__":
    sys.exit(main())
