# -*- coding: utf-8 -*-
"""
fourmap.csp パッケージ

ヒント付き盤面の解答と難易度判定に関する処理をまとめています。

主に以下の役割を持つモジュールから構成されています。
- context.py     : 候補色ビットマスクと変更ログを持つソルバーの状態
- propagation.py : 制約伝播（singleton / pair exclusion / forcing chain）
- search.py      : 推論 + 再帰探索による解の分類と難易度判定
"""
