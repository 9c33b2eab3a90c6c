## simple hopoint framework for dxf-rendered sampled geometry using
## the ezdxf package
## Copyright (c) 2026 hopoint contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

import logging

import ezdxf

import hopoint.drawable as drawable

logger = logging.getLogger(__name__)

## class to provide dxf drawing functionality.  Geometry is written in
## full 3D: points as POINT entities, segments as LINE entities and
## sampled curves as 3D POLYLINE entities.
class ezdxfDraw(drawable.Drawable):

    def __init__(self):
        super().__init__()

        # setup=False avoids creating default blocks that some CAD
        # programs cannot read
        self.__doc = ezdxf.new(dxfversion='R2010', setup=False)
        self.__doc.header['$MEASUREMENT'] = 1 # metric
        self.__doc.header['$INSUNITS'] = 4 # millimeters
        self.__doc.layers.new('CURVES',  dxfattribs={'color': 7}) #white
        self.__doc.layers.new('SURFACES',  dxfattribs={'color': 4}) #aqua
        self.__doc.layers.new('POINTS', dxfattribs={'color': 2}) #yellow
        self.__msp = self.__doc.modelspace()
        self.__filename = "hopoint-out"
        self.layerlist = [False, '0', 'CURVES', 'SURFACES', 'POINTS']

    def __repr__(self):
        return 'an instance of ezdxfDraw'

    ## properties

    @property
    def filename(self):
        return self.__filename

    def _set_filename(self,name):
        self.__filename = name

    @filename.setter
    def filename(self,name):
        if not isinstance(name,str):
            raise ValueError('bad (non-string) filename: '+str(name))
        self._set_filename(name)

    @property
    def doc(self):
        return self.__doc

    @property
    def modelspace(self):
        return self.__msp

    def _attribs(self):
        layer=self.layer
        if layer == False:
            layer = '0'
        color = self.linecolor
        if color is False:
            color = 256 # bylayer
        return {'layer': layer, 'color': color}

    ## Overload virtual hopoint.drawable base class drawing methods

    def draw_point(self,p):
        self.__msp.add_point((p.x, p.y, p.z), dxfattribs=self._attribs())

    def draw_line(self,p1,p2):
        self.__msp.add_line((p1.x, p1.y, p1.z), (p2.x, p2.y, p2.z),
                            dxfattribs=self._attribs())

    def draw_polyline(self,pts):
        if len(pts) < 2:
            return
        self.__msp.add_polyline3d([(p.x, p.y, p.z) for p in pts],
                                  dxfattribs=self._attribs())

    def display(self):
        filename = "{}.dxf".format(self.filename)
        logger.info("writing %d entities to %s", len(self.__msp), filename)
        self.__doc.saveas(filename)
