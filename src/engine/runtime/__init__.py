"""
どこで: `engine.runtime` サブパッケージ。
何を: フレームシグナル → 波形背景 → 描画面 をつなぐ明示的レンダーループを提供。
なぜ: ホストのスケジューラに依存する部分を薄く保ち、単一スレッドで協調的に停止できるようにするため。
"""
