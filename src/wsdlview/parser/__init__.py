# Copyright 2026 wsdlview Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lenient parser turning WSDL source text into the wsdlview model."""

from wsdlview.parser.namespaces import NamespaceTable, QName
from wsdlview.parser.parser import WSDL_ROOT_NAMES, ParseResult, WsdlParser, parse
from wsdlview.parser.stitching import BindingInfo, find_binding_info
from wsdlview.parser.tree import DocumentLoadError, XmlNode, load_document

__all__ = [
    "parse",
    "ParseResult",
    "WsdlParser",
    "WSDL_ROOT_NAMES",
    "NamespaceTable",
    "QName",
    "BindingInfo",
    "find_binding_info",
    "XmlNode",
    "DocumentLoadError",
    "load_document",
]
