"""Fixed prompt and request body for food image analysis."""

from typing import Any

ANALYSIS_TEMPERATURE = 0.7
ANALYSIS_MAX_TOKENS = 1500

# Answers are requested in Indonesian.
FOOD_ANALYSIS_PROMPT = """Analyze this food image in Indonesian language and provide detailed nutritional information. Include:

1. 🍽️ Identifikasi Makanan (nama makanan yang terdeteksi)
2. 🔥 Estimasi Kalori (dalam kkal)
3. 📊 Makronutrien:
   - Protein (gram)
   - Karbohidrat (gram)
   - Lemak (gram)
4. 📏 Estimasi Porsi (dalam gram atau ml)
5. 💡 Tips Kesehatan atau catatan penting
6. ⚖️ Rekomendasi: Apakah makanan ini cocok untuk diet? (Ya/Tidak dan alasannya)

Berikan jawaban yang spesifik dengan angka yang akurat. Format jawaban dengan rapi dan mudah dibaca."""


def image_data_uri(image_base64: str) -> str:
    """Wrap a bare base64 payload as a JPEG data URI."""
    return f"data:image/jpeg;base64,{image_base64}"


def build_analysis_request(model: str, image_base64: str) -> dict[str, Any]:
    """
    Build the chat-completions body for one food image.

    Args:
        model: Model identifier
        image_base64: Base64 image payload (no data-URL prefix)

    Returns:
        JSON-serializable request body with a single user message
    """
    return {
        "model": model,
        "messages": [
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": FOOD_ANALYSIS_PROMPT},
                    {
                        "type": "image_url",
                        "image_url": {"url": image_data_uri(image_base64)},
                    },
                ],
            }
        ],
        "temperature": ANALYSIS_TEMPERATURE,
        "max_tokens": ANALYSIS_MAX_TOKENS,
    }
