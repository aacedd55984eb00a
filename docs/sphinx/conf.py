# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for wsdlview documentation."""

project = "wsdlview"
author = "wsdlview Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
