# -*- coding: utf-8 -*-
"""
fourmap.postprocess パッケージ

- render_result.py : 解答結果を表示・API 用の dict にまとめる
"""
