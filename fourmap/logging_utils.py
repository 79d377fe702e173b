# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

ポイント:
- fourmap パッケージ内のモジュールは、すべて get_logger() で
  同じ名前のロガーを取得します。
- 呼び出し側（API など）ですでにハンドラを設定している場合は、
  そちらの設定をそのまま使います。
"""

from __future__ import annotations

import logging

# fourmap パッケージ共通で使うロガー名
LOGGER_NAME = "fourmap"


def get_logger() -> logging.Logger:
    """
    fourmap 全体で共通して使う logger を返します。

    すでに handler（出力先）が設定されていない場合は、
    標準出力（コンソール）に INFO レベルのログを表示するように設定します。
    """
    logger = logging.getLogger(LOGGER_NAME)

    # まだハンドラが設定されていなければ、簡単な設定を行う
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger
