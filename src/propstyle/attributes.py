"""
Prop-name filtering for components that forward props to the DOM.

A styled component receives both style props (``m``, ``px``, ``color``) and
attributes meant for the rendered element (``href``, ``id``, ``onClick``).
``create_sfp`` builds the "should forward prop" predicate that tells them
apart: a name is forwarded when it is a known HTML/SVG attribute and is not
one of the component's own style props.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from functools import lru_cache

# HTML and SVG attribute names in their JSX spelling
HTML_ATTRIBUTES: frozenset[str] = frozenset(
    {
        # React-specific
        "children", "dangerouslySetInnerHTML", "key", "ref", "autoFocus",
        "defaultValue", "defaultChecked", "innerHTML", "suppressContentEditableWarning",
        "suppressHydrationWarning", "valueLink",
        # HTML
        "abbr", "accept", "acceptCharset", "accessKey", "action", "allow",
        "allowFullScreen", "allowPaymentRequest", "allowTransparency", "alt", "async",
        "autoComplete", "autoPlay", "capture", "cellPadding", "cellSpacing", "challenge",
        "charSet", "checked", "cite", "classID", "className", "cols", "colSpan", "content",
        "contentEditable", "contextMenu", "controls", "controlsList", "coords",
        "crossOrigin", "data", "dateTime", "decoding", "default", "defer", "dir",
        "disabled", "disablePictureInPicture", "download", "draggable", "encType",
        "enterKeyHint", "form", "formAction", "formEncType", "formMethod",
        "formNoValidate", "formTarget", "frameBorder", "headers", "height", "hidden",
        "high", "href", "hrefLang", "htmlFor", "httpEquiv", "id", "inputMode",
        "integrity", "is", "keyParams", "keyType", "kind", "label", "lang", "list",
        "loading", "loop", "low", "marginHeight", "marginWidth", "max", "maxLength",
        "media", "mediaGroup", "method", "min", "minLength", "multiple", "muted", "name",
        "nonce", "noValidate", "open", "optimum", "pattern", "placeholder", "playsInline",
        "poster", "preload", "profile", "radioGroup", "readOnly", "referrerPolicy", "rel",
        "required", "reversed", "role", "rows", "rowSpan", "sandbox", "scope", "scoped",
        "scrolling", "seamless", "selected", "shape", "size", "sizes", "slot", "span",
        "spellCheck", "src", "srcDoc", "srcLang", "srcSet", "start", "step", "style",
        "summary", "tabIndex", "target", "title", "translate", "type", "useMap", "value",
        "width", "wmode", "wrap",
        # Microdata and RDFa
        "about", "datatype", "inlist", "prefix", "property", "resource", "typeof", "vocab",
        "itemProp", "itemScope", "itemType", "itemID", "itemRef",
        # Non-standard
        "autoCapitalize", "autoCorrect", "autoSave", "color", "incremental",
        "fallback", "inert", "results", "security", "unselectable",
        # SVG
        "accentHeight", "accumulate", "additive", "alignmentBaseline",
        "allowReorder", "alphabetic", "amplitude", "arabicForm", "ascent",
        "attributeName", "attributeType", "autoReverse", "azimuth", "baseFrequency",
        "baselineShift", "baseProfile", "bbox", "begin", "bias", "by", "calcMode",
        "capHeight", "clip", "clipPathUnits", "clipPath", "clipRule",
        "colorInterpolation", "colorInterpolationFilters", "colorProfile",
        "colorRendering", "contentScriptType", "contentStyleType", "cursor", "cx", "cy",
        "d", "decelerate", "descent", "diffuseConstant", "direction", "display", "divisor",
        "dominantBaseline", "dur", "dx", "dy", "edgeMode", "elevation", "enableBackground",
        "end", "exponent", "externalResourcesRequired", "fill", "fillOpacity", "fillRule",
        "filter", "filterRes", "filterUnits", "floodColor", "floodOpacity", "focusable",
        "fontFamily", "fontSize", "fontSizeAdjust", "fontStretch", "fontStyle",
        "fontVariant", "fontWeight", "format", "from", "fr", "fx", "fy", "g1", "g2",
        "glyphName", "glyphOrientationHorizontal", "glyphOrientationVertical", "glyphRef",
        "gradientTransform", "gradientUnits", "hanging", "horizAdvX", "horizOriginX",
        "ideographic", "imageRendering", "in", "in2", "intercept", "k", "k1", "k2", "k3",
        "k4", "kernelMatrix", "kernelUnitLength", "kerning", "keyPoints", "keySplines",
        "keyTimes", "lengthAdjust", "letterSpacing", "lightingColor", "limitingConeAngle",
        "local", "markerEnd", "markerMid", "markerStart", "markerHeight", "markerUnits",
        "markerWidth", "mask", "maskContentUnits", "maskUnits", "mathematical", "mode",
        "numOctaves", "offset", "opacity", "operator", "order", "orient", "orientation",
        "origin", "overflow", "overlinePosition", "overlineThickness", "panose1",
        "paintOrder", "pathLength", "patternContentUnits", "patternTransform",
        "patternUnits", "pointerEvents", "points", "pointsAtX", "pointsAtY", "pointsAtZ",
        "preserveAlpha", "preserveAspectRatio", "primitiveUnits", "r", "radius", "refX",
        "refY", "renderingIntent", "repeatCount", "repeatDur", "requiredExtensions",
        "requiredFeatures", "restart", "result", "rotate", "rx", "ry", "scale", "seed",
        "shapeRendering", "slope", "spacing", "specularConstant", "specularExponent",
        "speed", "spreadMethod", "startOffset", "stdDeviation", "stemh", "stemv",
        "stitchTiles", "stopColor", "stopOpacity", "strikethroughPosition",
        "strikethroughThickness", "string", "stroke", "strokeDasharray",
        "strokeDashoffset", "strokeLinecap", "strokeLinejoin", "strokeMiterlimit",
        "strokeOpacity", "strokeWidth", "surfaceScale", "systemLanguage", "tableValues",
        "targetX", "targetY", "textAnchor", "textDecoration", "textRendering",
        "textLength", "to", "transform", "u1", "u2", "underlinePosition",
        "underlineThickness", "unicode", "unicodeBidi", "unicodeRange", "unitsPerEm",
        "vAlphabetic", "vHanging", "vIdeographic", "vMathematical", "values",
        "vectorEffect", "version", "vertAdvY", "vertOriginX", "vertOriginY", "viewBox",
        "viewTarget", "visibility", "widths", "wordSpacing", "writingMode", "x",
        "xHeight", "x1", "x2", "xChannelSelector", "xlinkActuate", "xlinkArcrole",
        "xlinkHref", "xlinkRole", "xlinkShow", "xlinkTitle", "xlinkType", "xmlBase",
        "xmlns", "xmlnsXlink", "xmlLang", "xmlSpace", "y", "y1", "y2",
        "yChannelSelector", "z", "zoomAndPan",
    }
)

# data-*, aria-* and x-* attributes, plus on<Event> handlers
_ATTRIBUTE_PATTERN = re.compile(r"^((data|aria|x)-.*|on[A-Z].*)$")


@lru_cache(maxsize=4096)
def is_prop_valid(name: str) -> bool:
    """Return True if ``name`` is an attribute the rendered element accepts.

    Examples:
        >>> is_prop_valid("href"), is_prop_valid("data-testid"), is_prop_valid("onClick")
        (True, True, True)

        >>> is_prop_valid("mx")
        False
    """
    return name in HTML_ATTRIBUTES or bool(_ATTRIBUTE_PATTERN.match(name))


def create_sfp(prop_names: Iterable[str] = ()) -> Callable[[str], bool]:
    """Build a memoized should-forward-prop predicate.

    Args:
        prop_names: Prop names that are never forwarded, typically a
            parser's ``prop_names``

    Returns:
        Predicate returning True when a prop should reach the element

    Examples:
        >>> sfp = create_sfp(["m", "color"])
        >>> sfp("href"), sfp("color"), sfp("m")
        (True, False, False)
    """
    excluded = frozenset(prop_names)

    @lru_cache(maxsize=None)
    def should_forward_prop(name: str) -> bool:
        return is_prop_valid(name) and name not in excluded

    return should_forward_prop


__all__ = ["HTML_ATTRIBUTES", "is_prop_valid", "create_sfp"]
