"""MiniMax generative media tools (speech, voice cloning, image, video)."""
