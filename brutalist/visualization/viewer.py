"""Standalone HTML preview of a scene, rendered with Three.js."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from string import Template

from brutalist.visualization.scene import Scene

logger = logging.getLogger(__name__)

PAGE_TITLE = "Concrete | Brutalist Generator"
THREE_VERSION = "0.160.0"


def _caption(scene: Scene) -> str:
    parts = [scene.composition or "assembly", f"{len(scene.meshes)} elements"]
    if scene.seed is not None:
        parts.append(f"seed {scene.seed:.6g}")
    if scene.fallback_count:
        parts.append(f"{scene.fallback_count} fallback")
    return " · ".join(parts)


def generate_viewer(scene: Scene, output_path: str | Path) -> Path:
    """Write a self-contained HTML page for *scene* and return its path.

    The page loads Three.js from a CDN, shades every mesh with a
    ``MeshStandardMaterial`` built from its color, roughness and metalness,
    and turns the assembly slowly about the y axis.  Fallback meshes are
    drawn as red wireframes so they stand out.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    camera = scene.camera
    html = _PAGE.substitute(
        title=f"{PAGE_TITLE} - {scene.composition or 'assembly'}",
        caption=_caption(scene),
        three=THREE_VERSION,
        scene_json=scene.to_json(indent=None),
        camera_json=json.dumps(camera.to_dict()),
    )
    output_path.write_text(html, encoding="utf-8")
    logger.debug("Viewer for %d meshes written to %s", len(scene.meshes), output_path)
    return output_path


_PAGE = Template("""\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>$title</title>
<style>
  html, body { margin: 0; height: 100%; overflow: hidden; background: #000000; }
  #panel { position: absolute; top: 20px; left: 20px; padding: 12px 16px;
           background: rgba(0, 0, 0, 0.8); color: #ffffff; border-radius: 4px;
           font-family: Inter, sans-serif; font-weight: 300; font-size: 13px; }
  #panel h1 { margin: 0 0 6px; font-size: 15px; font-weight: 500; }
</style>
</head>
<body>
<div id="panel"><h1>Concrete</h1>$caption<br>drag to orbit, scroll to zoom</div>
<script src="https://cdn.jsdelivr.net/npm/three@$three/build/three.min.js"></script>
<script src="https://cdn.jsdelivr.net/npm/three@$three/examples/js/controls/OrbitControls.js"></script>
<script>
const data = $scene_json;
const view = $camera_json;

const renderer = new THREE.WebGLRenderer({ antialias: true, alpha: false, powerPreference: "high-performance" });
renderer.setPixelRatio(Math.min(window.devicePixelRatio, 2));
renderer.setSize(window.innerWidth, window.innerHeight);
renderer.shadowMap.enabled = true;
document.body.appendChild(renderer.domElement);

const scene = new THREE.Scene();
scene.background = new THREE.Color("#000000");

const camera = new THREE.PerspectiveCamera(view.fov, window.innerWidth / window.innerHeight, 0.1, 1000);
camera.up.fromArray(view.up);
camera.position.fromArray(view.position);

const controls = new THREE.OrbitControls(camera, renderer.domElement);
controls.target.fromArray(view.target);
controls.enableDamping = true;
controls.dampingFactor = 0.05;
controls.minDistance = 5;
controls.maxDistance = 50;

scene.add(new THREE.AmbientLight("#ffffff", 0.5));
const sun = new THREE.DirectionalLight("#ffffff", 1);
sun.position.set(10, 10, 5);
sun.castShadow = true;
sun.shadow.mapSize.set(2048, 2048);
scene.add(sun);
const sky = new THREE.HemisphereLight("#ffffff", "#cccccc", 0.3);
sky.position.set(0, 50, 0);
scene.add(sky);

const assembly = new THREE.Group();
for (const m of data.meshes) {
  const geometry = new THREE.BufferGeometry();
  geometry.setAttribute("position", new THREE.Float32BufferAttribute(m.vertices.flat(), 3));
  geometry.setIndex(m.faces.flat());
  geometry.computeVertexNormals();
  const failed = Boolean(m.userData && m.userData.error);
  const material = new THREE.MeshStandardMaterial({
    color: m.color,
    roughness: m.roughness,
    metalness: m.metalness,
    wireframe: failed,
  });
  const mesh = new THREE.Mesh(geometry, material);
  mesh.name = m.name;
  mesh.userData = m.userData;
  mesh.castShadow = !failed;
  mesh.receiveShadow = true;
  assembly.add(mesh);
}
scene.add(assembly);

const clock = new THREE.Clock();
renderer.setAnimationLoop(() => {
  assembly.rotation.y += clock.getDelta() * 0.2;
  controls.update();
  renderer.render(scene, camera);
});

window.addEventListener("resize", () => {
  camera.aspect = window.innerWidth / window.innerHeight;
  camera.updateProjectionMatrix();
  renderer.setSize(window.innerWidth, window.innerHeight);
});
</script>
</body>
</html>
""")
