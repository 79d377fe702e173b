# -*- coding: utf-8 -*-
"""
fourmap.codec パッケージ

- description.py : 問題記述 "<辺リスト>,<ヒントリスト>" の変換
- params.py      : パラメータ文字列 "WxHnNdD" の変換
"""
