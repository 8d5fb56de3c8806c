# CLASSIFICATION: COMMUNITY
# Filename: __main__.py v0.1
# Author: Lukas Bower
# Date Modified: 2026-10-19
from .cli import entry

entry()
