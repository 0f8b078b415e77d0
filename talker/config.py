NODE_NAME = "talker"

# ---- Payload / rate ----
DEFAULT_MESSAGE = "Written By Aman Virmani"
DEFAULT_FREQUENCY_HZ = 10

# ---- Topics / services ----
CHATTER_TOPIC = "chatter"
CHATTER_QUEUE_DEPTH = 1000
SERVICE_NAME = "modifyTalkerMessage"

# ---- Transform (constant pose of "talk" in "world") ----
PARENT_FRAME = "world"
CHILD_FRAME  = "talk"
TRANSLATION  = (0.0, 2.0, 0.0)
ROTATION_RPY = (0.0, 0.0, 1.0)  # roll, pitch, yaw in radians

# ---- HTTP (status + modify) ----
API_ENABLED = True
API_HOST = "0.0.0.0"
API_PORT = 8000
