"""
deckkit Core Module - 纯领域逻辑层

核心模块只依赖标准库，不依赖应用层。

Modules:
    deck: 牌面、牌组类型和牌组容器
    exceptions: 异常定义
"""
