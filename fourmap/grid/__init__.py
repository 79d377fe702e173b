# -*- coding: utf-8 -*-
"""
fourmap.grid パッケージ

盤面（グリッド）に関する処理をまとめたサブパッケージです。
- freqtable.py : 重み付き抽選用の累積度数表
- generator.py : 領域分割のランダム生成
- parser.py    : DataFrame などから内部表現への変換
"""
