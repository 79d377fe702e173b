# -*- coding: utf-8 -*-
"""
fourmap.graph パッケージ

- adjacency.py  : 領域の隣接グラフ
- fourcolour.py : 隣接グラフの 4 色塗り分け
"""
