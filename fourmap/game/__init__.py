# -*- coding: utf-8 -*-
"""
fourmap.game パッケージ

- state.py : プレイ中の局面と手の適用・完成判定
"""
