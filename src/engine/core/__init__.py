"""
どこで: `engine.core` サブパッケージ。
何を: アニメーションクロック・Outline・フレーム駆動（Tickable/FrameClock）・描画ウィンドウを提供。
なぜ: 位相計算と描画の基盤を構成し、上位層（shapes/runtime/render/api）から再利用可能にするため。
"""
