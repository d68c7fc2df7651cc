# Tool defaults, applied by the handlers when an optional argument is absent.
DEFAULT_VOICE_ID = "male-qn-qingse"
DEFAULT_T2A_MODEL = "speech-02-hd"
DEFAULT_VC_MODEL = "speech-02-hd"
DEFAULT_SPEED = 1.0
DEFAULT_VOLUME = 1.0
DEFAULT_PITCH = 0
DEFAULT_EMOTION = "happy"
DEFAULT_SAMPLE_RATE = 32000
DEFAULT_BITRATE = 128000
DEFAULT_CHANNEL = 1
DEFAULT_FORMAT = "mp3"
DEFAULT_LANGUAGE_BOOST = "auto"
DEFAULT_VOICE_TYPE = "all"

DEFAULT_T2I_MODEL = "image-01"
DEFAULT_ASPECT_RATIO = "1:1"
DEFAULT_IMAGE_COUNT = 1
DEFAULT_PROMPT_OPTIMIZER = True

DEFAULT_T2V_MODEL = "T2V-01"

# Video job polling: up to 10 minutes (30 * 20 seconds)
VIDEO_POLL_INTERVAL = 20
VIDEO_MAX_POLLS = 30

# HTTP timeouts (seconds)
REQUEST_TIMEOUT = 30
UPLOAD_TIMEOUT = 60

# Vendor endpoints
T2A_ENDPOINT = "/v1/t2a_v2"
GET_VOICE_ENDPOINT = "/v1/get_voice"
VOICE_CLONE_ENDPOINT = "/v1/voice_clone"
FILE_UPLOAD_ENDPOINT = "/v1/files/upload"
FILE_RETRIEVE_ENDPOINT = "/v1/files/retrieve"
VIDEO_GENERATION_ENDPOINT = "/v1/video_generation"
VIDEO_QUERY_ENDPOINT = "/v1/query/video_generation"
IMAGE_GENERATION_ENDPOINT = "/v1/image_generation"

# Video job states reported by the query endpoint
VIDEO_STATUS_SUCCESS = "Success"
VIDEO_STATUS_FAIL = "Fail"
