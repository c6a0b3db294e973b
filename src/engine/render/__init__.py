"""
どこで: `engine.render` サブパッケージ。
何を: `Outline` → pyglet 形状 への変換と描画（FillRenderer）を提供。
なぜ: 計算（core/shapes）と描画の責務を分離し、描画リソース管理を局所化するため。
"""
