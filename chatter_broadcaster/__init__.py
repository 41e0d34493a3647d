from chatter_broadcaster.state import SharedTextState, DEFAULT_BASE_STRING
from chatter_broadcaster.service import ModifyStringHandler, ModifyStringRequest, ModifyStringResponse
from chatter_broadcaster.broadcaster import BroadcastLoop, TransformSample, compute_transform
from chatter_broadcaster.config import TalkerConfig, parse_rate, load_config, DEFAULT_RATE
