# -*- coding: utf-8 -*-
"""
fourmap.generation パッケージ

- assembler.py : 盤面生成・塗り分け・ヒント削減をまとめて問題を組み立てる
"""
