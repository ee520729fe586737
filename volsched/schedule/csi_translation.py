"""
csi_translation.py
~~~~~~~~~~~~~~~~~~
把 in-tree 存储插件名翻译成 CSI driver 名。
映射表由构造参数注入，测试时可以替换。
"""
from __future__ import annotations
from typing import Dict, Mapping, Tuple

from .constants import IN_TREE_TO_CSI


class CSITranslator:
    """只读查表；找不到映射时原样返回"""

    def __init__(self, mapping: Mapping[str, str] | None = None):
        self._mapping: Dict[str, str] = dict(IN_TREE_TO_CSI if mapping is None else mapping)

    def translate(self, in_tree_name: str) -> Tuple[str, bool]:
        """返回 (csi_name, found)；found=False 时 csi_name 即输入本身"""
        csi_name = self._mapping.get(in_tree_name)
        if csi_name is None:
            return in_tree_name, False
        return csi_name, True

    def is_in_tree(self, name: str) -> bool:
        return name in self._mapping

    def __repr__(self):
        return f"CSITranslator({len(self._mapping)} plugins)"
