"""
Develop Parameter Definitions (Compact).

Single file containing all Lightroom develop parameters exposed to the
plug-in's settings table, in the order their bindings are generated.

Parameters whose slider moved to a new process version are read through the
versioned getter under their versioned setting name (e.g. "Exposure2012").
"""

from .schema import ParamDef, DEFAULT_CATEGORY
from .registry import REGISTRY


# HSL / color mixer channels, in Lightroom's panel order
COLORS = ["Red", "Orange", "Yellow", "Green", "Aqua", "Blue", "Purple", "Magenta"]


def _r(name, lo, hi, alias=None, category=DEFAULT_CATEGORY, description=""):
    """Register a parameter."""
    REGISTRY.register(ParamDef.make(name, lo, hi, alias=alias, category=category,
                                    description=description))


def _load():  # pylint: disable=too-many-statements
    # --- Basic: white balance ---
    _r("Temperature", 2000, 50000, description="White balance temperature in Kelvin")
    _r("Tint", -150, 150, description="White balance tint")

    # --- Basic: tone (process version 2012 sliders are versioned) ---
    _r("Exposure", -5, 5, alias="Exposure2012", description="Exposure in stops")
    _r("Highlights", -100, 100, alias="Highlights2012")
    _r("Shadows", -100, 100, alias="Shadows2012")
    _r("Brightness", -150, 150)
    _r("Contrast", -100, 100, alias="Contrast2012")
    _r("Whites", -100, 100, alias="Whites2012")
    _r("Blacks", -100, 100, alias="Blacks2012")

    # --- Basic: presence ---
    _r("Texture", -100, 100)
    _r("Clarity", -100, 100, alias="Clarity2012")
    _r("Dehaze", -100, 100)
    _r("Vibrance", -100, 100)
    _r("Saturation", -100, 100)

    # --- Tone curve (parametric) ---
    for region in ["Darks", "Lights", "Shadows", "Highlights"]:
        _r(f"Parametric{region}", -100, 100)
    _r("ParametricShadowSplit", 10, 70)
    _r("ParametricMidtoneSplit", 20, 80)
    _r("ParametricHighlightSplit", 30, 90)

    # --- HSL / color mixer ---
    for adjustment in ["Saturation", "Hue", "Luminance"]:
        for color in COLORS:
            _r(f"{adjustment}Adjustment{color}", -100, 100)

    # --- Color grading (split toning keeps its legacy names) ---
    _r("SplitToningShadowHue", 0, 360)
    _r("SplitToningShadowSaturation", 0, 100)
    _r("ColorGradeShadowLum", -100, 100)
    _r("SplitToningHighlightHue", 0, 360)
    _r("SplitToningHighlightSaturation", 0, 100)
    _r("ColorGradeHighlightLum", -100, 100)
    for zone in ["Midtone", "Global"]:
        _r(f"ColorGrade{zone}Hue", 0, 360)
        _r(f"ColorGrade{zone}Sat", 0, 100)
        _r(f"ColorGrade{zone}Lum", -100, 100)
    _r("SplitToningBalance", -100, 100)
    _r("ColorGradeBlending", 0, 100)

    # --- Detail: sharpening ---
    _r("Sharpness", 0, 150)
    _r("SharpenRadius", 0.5, 3, description="Sharpening radius in pixels")
    _r("SharpenDetail", 0, 100)
    _r("SharpenEdgeMasking", 0, 100)

    # --- Detail: noise reduction ---
    _r("LuminanceSmoothing", 0, 100)
    _r("LuminanceNoiseReductionDetail", 0, 100)
    _r("LuminanceNoiseReductionContrast", 0, 100)
    _r("ColorNoiseReduction", 0, 100)
    _r("ColorNoiseReductionDetail", 0, 100)
    _r("ColorNoiseReductionSmoothness", 0, 100)

    # --- Effects: post-crop vignette ---
    _r("PostCropVignetteAmount", -100, 100)
    _r("PostCropVignetteMidpoint", 0, 100)
    _r("PostCropVignetteFeather", 0, 100)
    _r("PostCropVignetteRoundness", -100, 100)
    _r("PostCropVignetteStyle", 1, 3, description="1=highlight priority, 2=color priority, 3=paint overlay")
    _r("PostCropVignetteHighlightContrast", 0, 100)

    # --- Effects: grain ---
    for a in ["Amount", "Size", "Frequency"]:
        _r(f"Grain{a}", 0, 100)

    # --- Lens corrections ---
    _r("LensProfileDistortionScale", 0, 200)
    _r("LensProfileVignettingScale", 0, 200)
    _r("LensManualDistortionAmount", -100, 100)
    _r("DefringePurpleAmount", 0, 20)
    _r("DefringePurpleHueLo", 0, 60)
    _r("DefringePurpleHueHi", 40, 100)
    _r("DefringeGreenAmount", 0, 20)
    _r("DefringeGreenHueLo", 0, 50)
    _r("DefringeGreenHueHi", 50, 100)

    # --- Transform ---
    _r("PerspectiveVertical", -100, 100)
    _r("PerspectiveHorizontal", -100, 100)
    _r("PerspectiveRotate", -10, 10)
    _r("PerspectiveScale", 50, 150)
    _r("PerspectiveAspect", -100, 100)
    _r("PerspectiveX", -100, 100)
    _r("PerspectiveY", -100, 100)
    _r("PerspectiveUpright", 0, 5)

    # --- Calibration ---
    _r("ShadowTint", -100, 100)
    for primary in ["Red", "Green", "Blue"]:
        _r(f"{primary}Hue", -100, 100)
        _r(f"{primary}Saturation", -100, 100)


# Load definitions when module imported and freeze registry
def _init_registry():
    """Initialize and freeze the registry. Called once at module import."""
    try:
        _load()

        # Freeze registry to prevent further modifications
        REGISTRY.freeze()
    except Exception as e:
        # Re-raise with context to help debugging initialization failures
        raise RuntimeError(
            f"Failed to initialize parameter registry: {e}\n"
            "This is likely a bug in the parameter definitions."
        ) from e

_init_registry()
