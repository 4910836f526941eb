WHITE_RABBIT_VERSION = "0.2.0"

# version reported to clients that check for a vLLM server
VLLM_VERSION = "0.6.3.post1"


def get_version_info(include_details: bool = False) -> dict:
    info = {"version": VLLM_VERSION, "white_rabbit_version": WHITE_RABBIT_VERSION}
    if include_details:
        info["build_info"] = {
            "name": "white-rabbit",
            "description": "vLLM emulator serving mock OpenAI-compatible responses",
            "version": WHITE_RABBIT_VERSION,
            "vllm_version": VLLM_VERSION,
        }
    return info
