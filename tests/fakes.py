from services.inference import InferenceClient

PARACETAMOL = {
    "medicine_name": "Paracetamol",
    "uses": "Pain relief",
    "side_effects": "Nausea",
    "dosage": "500mg",
    "manufacturer": "Acme",
    "precautions": "Avoid alcohol",
    "expiry_date": "2026-01",
    "composition": "Paracetamol 500mg",
}


class FakeClient(InferenceClient):
    def __init__(self, response="", error=None):
        self.response = response
        self.error = error
        self.calls = []

    def complete(self, prompt, image_b64, mime_type, max_output_tokens):
        self.calls.append({
            "prompt": prompt,
            "image_b64": image_b64,
            "mime_type": mime_type,
            "max_output_tokens": max_output_tokens,
        })
        if self.error:
            raise self.error
        return self.response
