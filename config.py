"""
Safeguard Configuration
Feature layout, scoring weights, lexicons and alarm thresholds
"""
import os

# Scaler parameters exported from training (optional)
SCALER_PARAMS_PATH = os.environ.get("SAFEGUARD_SCALER_PATH", "")

# Vector Dimensions
FEATURE_DIM = 17  # 8 text + 9 audio
TEXT_FEATURE_DIM = 8  # indices 0-7
AUDIO_FEATURE_DIM = 9  # indices 8-16

# Text Scoring
NEGATIVE_KEYWORD_WEIGHT = 10
CRITICAL_KEYWORD_WEIGHT = 50
EMOTION_WORD_WEIGHT = 20
SCORE_CEILING = 100.0
NEUTRAL_SENTIMENT = 50.0

# Stress = fear * w + anger * w + bonus when sentiment is above threshold
STRESS_WEIGHTS = {
    "fear": 0.4,
    "anger": 0.3,
}
STRESS_SENTIMENT_THRESHOLD = 60.0
STRESS_SENTIMENT_BONUS = 20.0

# Audio
DEFAULT_TEMPO = 125.0  # training scaler mean, used when tempo is missing
BASELINE_PITCH = 200.0
BASELINE_ENERGY = 60.0


# Lexicons (single lower-case tokens)
NEGATIVE_WORDS = [
    'scared', 'afraid', 'terrified', 'frightened', 'fearful', 'fear',
    'help', 'please', 'stop', 'crying', 'cry', 'tears',
    'hurt', 'hurting', 'pain', 'painful', 'ache',
    'angry', 'mad', 'furious', 'rage', 'hate',
    'sad', 'depressed', 'miserable', 'unhappy', 'upset',
    'attack', 'attacking', 'danger', 'dangerous', 'threat',
    'emergency', 'urgent', 'critical', 'serious',
    'no', 'dont', 'never', 'cant',
    'wrong', 'bad', 'terrible', 'awful', 'horrible',
    'alone', 'lonely', 'abandoned', 'lost',
    'screaming', 'yelling', 'shouting'
]

POSITIVE_WORDS = [
    'happy', 'joy', 'joyful', 'excited', 'great',
    'good', 'wonderful', 'amazing', 'excellent', 'fantastic',
    'love', 'loving', 'loved', 'glad', 'pleased',
    'fine', 'okay', 'alright', 'safe', 'secure',
    'calm', 'peaceful', 'relaxed', 'comfortable',
    'smile', 'smiling', 'laugh', 'laughing', 'fun'
]

CRITICAL_KEYWORDS = [
    'help', 'rape', 'murder', 'kill', 'police', 'call', 'emergency', 'save', 'dying'
]

EMOTION_KEYWORDS = {
    'fear': [
        'scared', 'afraid', 'terrified', 'frightened', 'fearful', 'fear',
        'nervous', 'anxious', 'worried', 'panic', 'panicking',
        'threat', 'danger', 'dangerous', 'threatening'
    ],
    'anger': [
        'angry', 'mad', 'furious', 'rage', 'hate', 'hating',
        'annoyed', 'irritated', 'frustrated', 'infuriated',
        'stop', 'enough', 'leave'
    ],
}


# Threat Phrases (substring match on the lower-cased transcript)
CRITICAL_PHRASES = [
    'help', 'help me', 'stop', 'stop it', 'police', 'call police', 'rape', 'attack',
    'bachaao', 'bachao', 'madad', 'chodo', 'mat karo', 'ruko', 'nahi'
]

ALERT_PHRASES = [
    "don't touch", 'get away', 'go away', 'leave me', 'no', 'please'
]

# Acoustic alarm thresholds
HIGH_PITCH_THRESHOLD = 500  # Hz, screaming
HIGH_ENERGY_THRESHOLD = 80  # scaled RMS, loud noise (logged only)
NO_PITCH = -1  # pitch detector value for unvoiced frames

# Emergency Configuration
EMERGENCY_DEBOUNCE_SECONDS = 3.0

# Feature names by vector index
FEATURE_NAMES = [
    'has_keywords', 'keyword_threat', 'is_critical', 'is_negative',
    'sentiment_score', 'emotion_score', 'stress_score', 'fear_score',
    'pitch_mean', 'pitch_std', 'energy_mean', 'energy_std', 'zcr', 'tempo',
    'pitch_delta', 'energy_delta', 'baseline_flag'
]
