COST_WARNING = (
    "COST WARNING: This tool makes an API call to MiniMax which may incur costs. "
    "Only use when explicitly requested by the user."
)

TEXT_TO_AUDIO_DESCRIPTION = f"""
Convert text to audio with a given voice and save the output audio file to a given directory.

Use this tool to:
1. Read text aloud with one of the MiniMax system voices or a cloned voice.
2. Produce narration or voice-over files.

NOTES:
- Directory is optional. If not provided, the file is saved to the configured base path, or $HOME/Desktop.
- Voice id is optional. If not provided, the default voice is used. Call `list_voices` to see the options.
- Depending on the server's resource mode the result is either an audio URL or the path of the saved file.

{COST_WARNING}
"""

LIST_VOICES_DESCRIPTION = """
List all voices available for `text_to_audio`.

Returns system voices and voices created with `voice_clone`, each with its name and ID.
Only supported when the API host is https://api.minimax.chat.
"""

VOICE_CLONE_DESCRIPTION = f"""
Clone a voice using a provided audio file. The new voice is charged upon first use.

WORKFLOW:
1. The audio file (local path, or URL when `is_url` is true) is uploaded to MiniMax.
2. A new voice is created under `voice_id` and a demo sentence (`text`) is synthesized.
3. The new voice can then be used as `voice_id` in `text_to_audio`.

{COST_WARNING}
"""

GENERATE_VIDEO_DESCRIPTION = f"""
Generate a video from a prompt.

NOTES:
- Video generation is slow: the tool waits for the job to finish (up to ~10 minutes).
- "I2V" models take a first frame image (URL, data URI, or a local file path).
- "Director" models accept camera movement instructions in the prompt, e.g. [Pan left], [Zoom in], [Tracking shot].
- If the job does not finish in time, the error includes the task ID so it can be checked later.

{COST_WARNING}
"""

TEXT_TO_IMAGE_DESCRIPTION = f"""
Generate an image from a prompt.

NOTES:
- Depending on the server's resource mode the result is either image URLs or the images themselves.
- Up to 9 images can be generated in one call with `n`.

{COST_WARNING}
"""

# ── Parameter descriptions ─────────────────────────────────────────────

TEXT_PARAM = "The text to convert to speech."
VOICE_ID_PARAM = "Voice ID, e.g. 'male-qn-qingse', 'audiobook_female_1', 'cute_boy'."
T2A_MODEL_PARAM = (
    'The model to use. Values range ["speech-02-hd", "speech-02-turbo", "speech-01-hd", '
    '"speech-01-turbo", "speech-01-240228", "speech-01-turbo-240228"].'
)
SPEED_PARAM = "Speech speed, range 0.5 to 2.0, default 1.0."
VOL_PARAM = "Volume, range 0 to 10, default 1.0."
PITCH_PARAM = "Pitch, range -12 to 12, default 0."
EMOTION_PARAM = (
    "Emotion, one of ['happy', 'sad', 'angry', 'fearful', 'disgusted', 'surprised', 'neutral'], "
    "default 'happy'."
)
SAMPLE_RATE_PARAM = "Sample rate, one of [8000, 16000, 22050, 24000, 32000, 44100], default 32000."
BITRATE_PARAM = "Bitrate, one of [32000, 64000, 128000, 256000], default 128000."
CHANNEL_PARAM = "Channel, one of [1, 2], default 1."
FORMAT_PARAM = "Format, one of ['pcm', 'mp3', 'flac'], default 'mp3'."
LANGUAGE_BOOST_PARAM = "Language boost, default 'auto'."
OUTPUT_DIRECTORY_PARAM = "The directory to save the output file to. Optional."

VOICE_TYPE_PARAM = 'The type of voices to list. Values range ["all", "system", "voice_cloning"], default "all".'

CLONE_VOICE_ID_PARAM = "The id of the new voice, longer than 8 and shorter than 256 characters."
CLONE_FILE_PARAM = "The path to the audio file to clone, or a URL to the audio file."
CLONE_TEXT_PARAM = "The text to use for the demo audio."
IS_URL_PARAM = "Whether the file is a URL. Defaults to false."

VIDEO_MODEL_PARAM = (
    'The model to use. Values range ["T2V-01", "T2V-01-Director", "I2V-01", "I2V-01-Director", '
    '"I2V-01-live"]. "T2V" is text to video, "I2V" is image to video.'
)
VIDEO_PROMPT_PARAM = "The prompt to generate the video from."
FIRST_FRAME_PARAM = 'The first frame image (URL, data URI or local path). The model must be in the "I2V" series.'

IMAGE_MODEL_PARAM = 'The model to use. Values range ["image-01"], default "image-01".'
IMAGE_PROMPT_PARAM = "The prompt to generate the image from."
ASPECT_RATIO_PARAM = (
    'The aspect ratio of the image. Values range ["1:1", "16:9", "4:3", "3:2", "2:3", "3:4", '
    '"9:16", "21:9"], default "1:1".'
)
N_PARAM = "The number of images to generate. Values range [1, 9], default 1."
PROMPT_OPTIMIZER_PARAM = "Whether to optimize the prompt. Default true."
RESPONSE_FORMAT_PARAM = "Image response format, 'url' or 'base64'. Defaults to the server's resource mode."
