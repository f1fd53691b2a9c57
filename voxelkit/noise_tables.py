"""Gradient, value and simplex lookup tables shared by the noise generators."""

from __future__ import annotations

GRAD_X: tuple[float, ...] = (
    1.0, -1.0, 1.0, -1.0,
    1.0, -1.0, 1.0, -1.0,
    0.0, 0.0, 0.0, 0.0,
)

GRAD_Y: tuple[float, ...] = (
    1.0, 1.0, -1.0, -1.0,
    0.0, 0.0, 0.0, 0.0,
    1.0, -1.0, 1.0, -1.0,
)

GRAD_Z: tuple[float, ...] = (
    0.0, 0.0, 0.0, 0.0,
    1.0, 1.0, -1.0, -1.0,
    1.0, 1.0, -1.0, -1.0,
)

GRAD_4D: tuple[float, ...] = (
    0, 1, 1, 1, 0, 1, 1, -1, 0, 1, -1, 1, 0, 1, -1, -1,
    0, -1, 1, 1, 0, -1, 1, -1, 0, -1, -1, 1, 0, -1, -1, -1,
    1, 0, 1, 1, 1, 0, 1, -1, 1, 0, -1, 1, 1, 0, -1, -1,
    -1, 0, 1, 1, -1, 0, 1, -1, -1, 0, -1, 1, -1, 0, -1, -1,
    1, 1, 0, 1, 1, 1, 0, -1, 1, -1, 0, 1, 1, -1, 0, -1,
    -1, 1, 0, 1, -1, 1, 0, -1, -1, -1, 0, 1, -1, -1, 0, -1,
    1, 1, 1, 0, 1, 1, -1, 0, 1, -1, 1, 0, 1, -1, -1, 0,
    -1, 1, 1, 0, -1, 1, -1, 0, -1, -1, 1, 0, -1, -1, -1, 0,
)

VAL_LUT: tuple[float, ...] = (
    0.3490196078, 0.4352941176, -0.4509803922, 0.6392156863, 0.5843137255, -0.1215686275, 0.7176470588, -0.1058823529,
    0.3960784314, 0.0431372549, -0.03529411765, 0.3176470588, 0.7254901961, 0.137254902, 0.8588235294, -0.8196078431,
    -0.7960784314, -0.3333333333, -0.6705882353, -0.3882352941, 0.262745098, 0.3254901961, -0.6470588235, -0.9215686275,
    -0.5294117647, 0.5294117647, -0.4666666667, 0.8117647059, 0.3803921569, 0.662745098, 0.03529411765, -0.6156862745,
    -0.01960784314, -0.3568627451, -0.09019607843, 0.7490196078, 0.8352941176, -0.4039215686, -0.7490196078, 0.9529411765,
    -0.0431372549, -0.9294117647, -0.6549019608, 0.9215686275, -0.06666666667, -0.4431372549, 0.4117647059, -0.4196078431,
    -0.7176470588, -0.8117647059, -0.2549019608, 0.4901960784, 0.9137254902, 0.7882352941, -1.0, -0.4745098039,
    0.7960784314, 0.8509803922, -0.6784313725, 0.4588235294, 1.0, -0.1843137255, 0.4509803922, 0.1450980392,
    -0.231372549, -0.968627451, -0.8588235294, 0.4274509804, 0.003921568627, -0.003921568627, 0.2156862745, 0.5058823529,
    0.7647058824, 0.2078431373, -0.5921568627, 0.5764705882, -0.1921568627, -0.937254902, 0.08235294118, -0.08235294118,
    0.9058823529, 0.8274509804, 0.02745098039, -0.168627451, -0.7803921569, 0.1137254902, -0.9450980392, 0.2,
    0.01960784314, 0.5607843137, 0.2705882353, 0.4431372549, -0.9607843137, 0.6156862745, 0.9294117647, -0.07450980392,
    0.3098039216, 0.9921568627, -0.9137254902, -0.2941176471, -0.3411764706, -0.6235294118, -0.7647058824, -0.8901960784,
    0.05882352941, 0.2392156863, 0.7333333333, 0.6549019608, 0.2470588235, 0.231372549, -0.3960784314, -0.05098039216,
    -0.2235294118, -0.3725490196, 0.6235294118, 0.7019607843, -0.8274509804, 0.4196078431, 0.07450980392, 0.8666666667,
    -0.537254902, -0.5058823529, -0.8039215686, 0.09019607843, -0.4823529412, 0.6705882353, -0.7882352941, 0.09803921569,
    -0.6078431373, 0.8039215686, -0.6, -0.3254901961, -0.4117647059, -0.01176470588, 0.4823529412, 0.168627451,
    0.8745098039, -0.3647058824, -0.1607843137, 0.568627451, -0.9921568627, 0.9450980392, 0.5137254902, 0.01176470588,
    -0.1450980392, -0.5529411765, -0.5764705882, -0.1137254902, 0.5215686275, 0.1607843137, 0.3725490196, -0.2,
    -0.7254901961, 0.631372549, 0.7098039216, -0.568627451, 0.1294117647, -0.3098039216, 0.7411764706, -0.8509803922,
    0.2549019608, -0.6392156863, -0.5607843137, -0.3176470588, 0.937254902, 0.9843137255, 0.5921568627, 0.6941176471,
    0.2862745098, -0.5215686275, 0.1764705882, 0.537254902, -0.4901960784, -0.4588235294, -0.2078431373, -0.2156862745,
    0.7725490196, 0.3647058824, -0.2392156863, 0.2784313725, -0.8823529412, 0.8980392157, 0.1215686275, 0.1058823529,
    -0.8745098039, -0.9843137255, -0.7019607843, 0.9607843137, 0.2941176471, 0.3411764706, 0.1529411765, 0.06666666667,
    -0.9764705882, 0.3019607843, 0.6470588235, -0.5843137255, 0.05098039216, -0.5137254902, -0.137254902, 0.3882352941,
    -0.262745098, -0.3019607843, -0.1764705882, -0.7568627451, 0.1843137255, -0.5450980392, -0.4980392157, -0.2784313725,
    -0.9529411765, -0.09803921569, 0.8901960784, -0.2862745098, -0.3803921569, 0.5529411765, 0.7803921569, -0.8352941176,
    0.6862745098, 0.7568627451, 0.4980392157, -0.6862745098, -0.8980392157, -0.7725490196, -0.7098039216, -0.2470588235,
    -0.9058823529, 0.9764705882, 0.1921568627, 0.8431372549, -0.05882352941, 0.3568627451, 0.6078431373, 0.5450980392,
    0.4039215686, -0.7333333333, -0.4274509804, 0.6, 0.6784313725, -0.631372549, -0.02745098039, -0.1294117647,
    0.3333333333, -0.8431372549, 0.2235294118, -0.3490196078, -0.6941176471, 0.8823529412, 0.4745098039, 0.4666666667,
    -0.7411764706, -0.2705882353, 0.968627451, 0.8196078431, -0.662745098, -0.4352941176, -0.8666666667, -0.1529411765,
)

SIMPLEX_4D: tuple[int, ...] = (
    0, 1, 2, 3, 0, 1, 3, 2, 0, 0, 0, 0, 0, 2, 3, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 2, 3, 0,
    0, 2, 1, 3, 0, 0, 0, 0, 0, 3, 1, 2, 0, 3, 2, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 3, 2, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    1, 2, 0, 3, 0, 0, 0, 0, 1, 3, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 3, 0, 1, 2, 3, 1, 0,
    1, 0, 2, 3, 1, 0, 3, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 3, 1, 0, 0, 0, 0, 2, 1, 3, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    2, 0, 1, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 0, 1, 2, 3, 0, 2, 1, 0, 0, 0, 0, 3, 1, 2, 0,
    2, 1, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 1, 0, 2, 0, 0, 0, 0, 3, 2, 0, 1, 3, 2, 1, 0,
)